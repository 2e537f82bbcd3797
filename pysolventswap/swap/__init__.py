from .swap import batch_solvent_swap, batch_solvent_swap_by_mass, run_cycles, CycleRecord, SwapReport
