from .point import Point, Size, lerp
from .elements import (MoveTo, Line, Quad, Cubic, Close, is_element, is_curve,
                       element_from_points, iter_segments, start_point,
                       end_point, all_points)
from .bezier import (line_point, quad_point, cubic_point, bezier_point,
                     line_derivative, quad_derivative, cubic_derivative,
                     bezier_derivative, segment_bpoints, segment_line,
                     segment_quad, segment_cubic, segment, element_point)
from .arclength import (IntegrationError, quick_length, element_quick_length,
                        quick_lengths, quad_length, cubic_length,
                        element_length, path_length)
from .lookup import (LookupTable, generate_lookup_table, closest_index,
                     closest_point, percent_along)
from .subdivision import (subdivide_line, subdivide_quad, subdivide_cubic,
                          subdivide_closing_line, subdivide_path)
from .parser import parse_path, serialize_path, element_string, to_svg_d
from .export import (sample_path, bounding_box, path_bounding_box,
                     normalize_point, normalized_elements, path2drawing)
from .polybezier import EditableElement, PolyBezier
