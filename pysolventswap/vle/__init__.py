from .vle import VaporLiquidResult, BubblePointResult, k_ideal, vapor_composition, solve_bubble_point, bubble_curve
