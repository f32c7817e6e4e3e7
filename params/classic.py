import numpy as np
from halton import SequenceParams

# 20 digits, the budget of the first releases. Holds bases up to 5.
def params(**args):
    return SequenceParams(
        digits = 20,
        index_dtype = np.uint64,
        float_dtype = np.float64
    )
