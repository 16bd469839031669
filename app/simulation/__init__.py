from .circuit_analysis import (AnalysisResult, analyze_circuit,
                               compute_current_magnitude, get_animation_speed)
from .flow_animation import FlowAnimator, FlowFrame, FlowPath, FlowState
from .geometry import SnapResult, find_nearest_point, project_point_to_segment
from .value_parser import format_value, parse_quantity, parse_value

__all__ = ['AnalysisResult', 'analyze_circuit', 'compute_current_magnitude',
           'get_animation_speed', 'FlowAnimator', 'FlowFrame', 'FlowPath',
           'FlowState', 'SnapResult', 'find_nearest_point',
           'project_point_to_segment', 'format_value', 'parse_quantity',
           'parse_value']
