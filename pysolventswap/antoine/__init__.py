from .antoine import AntoineSegment, choose_segment, segment_coverage, saturation_pressure, saturation_temperature
