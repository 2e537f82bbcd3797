from .shared_fns import bisect_solve, convert_to_numpy, process_output, check_fraction, check_positive, clamp01
