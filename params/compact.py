import numpy as np
from halton import SequenceParams

def params(**args):
    return SequenceParams(
        digits = None,
        index_dtype = np.uint16,
        float_dtype = np.float32
    )
