"""Pipeline orchestrator: runs the detection stages in a fixed order.

The order is part of the contract.  Many buffers satisfy several stages
weakly (ASCII text is trivially valid UTF-8, for example), so the first
decisive stage wins:

1. BOM sniffing
2. UTF-8 structural validation (only with multi-byte evidence)
3. UTF-16 null-pattern analysis
4. ASCII / ANSI / binary classification
"""

from __future__ import annotations

import logging

from encdetect.enums import Encoding
from encdetect.pipeline import DEFAULT_CONFIG, DetectorConfig
from encdetect.pipeline.ascii import classify_text
from encdetect.pipeline.bom import detect_bom
from encdetect.pipeline.utf8 import detect_utf8
from encdetect.pipeline.utf16 import analyze_utf16

logger = logging.getLogger(__name__)


def run_pipeline(data: bytes, config: DetectorConfig = DEFAULT_CONFIG) -> Encoding:
    """Run the full detection pipeline.

    :param data: The raw byte data to analyze.
    :param config: Thresholds to apply.
    :returns: The single :class:`Encoding` verdict for *data*.
    """
    bom_result = detect_bom(data)
    if bom_result is not None:
        logger.debug("BOM found: %s", bom_result.name)
        return bom_result

    utf8_result = detect_utf8(data)
    if utf8_result is not None:
        logger.debug("valid multi-byte UTF-8 in %d bytes", len(data))
        return utf8_result

    analysis = analyze_utf16(data, config)
    if analysis.encoding is not None:
        logger.debug(
            "UTF-16 null pattern: %s (odd nulls %d, even nulls %d, %d bytes)",
            analysis.encoding.name,
            analysis.odd_nulls,
            analysis.even_nulls,
            analysis.sample_size,
        )
        return analysis.encoding

    result = classify_text(data, analysis.null_ratio, config)
    logger.debug(
        "text classifier: %s (null ratio %.3f)", result.name, analysis.null_ratio
    )
    return result
