"""
Halton sequence generation.

This module can be run as a standalone script to plot the start of a
sequence against pseudo-random uniform samples.
"""

import numpy as np
import numba

def _check_base(base):
    if isinstance(base, bool) or not isinstance(base, (int, np.integer)) or base < 2:
        raise ValueError("Expected an integer base of at least 2 but got {}".format(base))
    return int(base)

def _fold(digits, base, top):
    """
    Reflect `digits[0:top]` about the radix point.

    The digits are folded in from the most significant one, so no separate
    digit weight is ever formed.
    """
    value = 0.0
    for j in range(top - 1, -1, -1):
        value = (digits[j] + value) / base
    return value

def number(base, index, dtype=np.float64):
    """
    Compute a single element of the Halton sequence.

    Parameters
    ----------
    base : int
        Base of the sequence, at least 2.
    index : int
        Zero-based position in the sequence.
    dtype : numpy float type, default np.float64

    Returns
    -------
    float
        The element at `index`, in [0, 1).
    """
    base = _check_base(base)
    if index < 0:
        raise ValueError("Expected a non-negative index but got {}".format(index))
    n = int(index) + 1
    digits = []
    while n > 0:
        digits.append(n % base)
        n //= base
    return dtype(_fold(digits, base, len(digits)))

@numba.njit
def _radical_inverse(start, base, out):
    digits = np.zeros(64, dtype=np.int64)
    for k in range(out.shape[0]):
        n = start + k + 1
        top = 0
        while n > 0:
            digits[top] = n % base
            n //= base
            top += 1
        value = 0.0
        for j in range(top - 1, -1, -1):
            value = (digits[j] + value) / base
        out[k] = value
    return out

def halton_sequence(n, base, start=0):
    """
    Return `n` consecutive elements of the sequence as an array.

    Element `i` of the result equals ``number(base, start + i)``.
    """
    base = _check_base(base)
    if n < 0 or start < 0:
        raise ValueError("Expected non-negative n and start but got {} and {}".format(n, start))
    if start + n > int(np.iinfo(np.int64).max):
        raise ValueError("Expected start + n to fit in int64 but got {}".format(start + n))
    return _radical_inverse(start, base, np.zeros(n))

class SequenceParams:
    """
    Configuration of a sequence iterator.

    Parameters
    ----------
    digits : int, optional
        Number of base-`b` digits tracked. The sequence has ``b**digits - 1``
        elements. By default, use the largest budget both `index_dtype` and the
        mantissa of `float_dtype` can hold.
    index_dtype : numpy integer type, default np.uint32
        Integer type bounding the largest index of the sequence.
    float_dtype : numpy float type, default np.float64
        Type of the returned values.
    """
    def __init__(self, digits=None, index_dtype=np.uint32, float_dtype=np.float64):
        self.digits = digits
        self.index_dtype = index_dtype
        self.float_dtype = float_dtype

    def digits_for(self, base):
        """
        Return the digit budget for `base`, checking that it fits the dtypes.
        """
        base = _check_base(base)
        max_index = int(np.iinfo(self.index_dtype).max)
        # the fold rounds by up to 3 units in the last place, so the gap
        # between the final element and 1 must stay wider than that
        max_value = 2**(np.finfo(self.float_dtype).nmant - 1)
        if self.digits is None:
            digits = 1
            while base**(digits + 1) - 1 <= max_index and base**(digits + 1) <= max_value:
                digits += 1
        else:
            digits = self.digits
        if digits < 1:
            raise ValueError("Expected at least 1 digit but got {}".format(digits))
        if base**digits - 1 > max_index:
            raise ValueError("{} digits in base {} overflow {}".format(
                digits, base, np.dtype(self.index_dtype).name
            ))
        if base**digits > max_value:
            raise ValueError("{} digits in base {} lose precision in {}".format(
                digits, base, np.dtype(self.float_dtype).name
            ))
        return digits

    def __repr__(self):
        return "SequenceParams(digits={}, index_dtype={}, float_dtype={})".format(
            self.digits, np.dtype(self.index_dtype).name, np.dtype(self.float_dtype).name
        )

class GenericSequence:
    """
    Iterator over the Halton sequence in a single base.

    The digits of the current index are kept least significant first, along
    with ``partial[i]``, the reflected value of the digits above position `i`.
    Stepping by one only touches the digits the carry reaches, while jumps
    rebuild the state from the target index.

    Parameters
    ----------
    base : int
        Base of the sequence, at least 2.
    params : SequenceParams, optional
        Digit budget and dtypes. Defaults to ``SequenceParams()``.
    start : int, default 0
        Index of the first element produced.

    Notes
    -----
    `len` reports the remaining length but Python caps it at `sys.maxsize`.
    The precision bound on the digit budget keeps float64 and float32
    sequences below that, the `remaining` attribute has no such limit.
    """
    def __init__(self, base, params=None, start=0):
        self._base = _check_base(base)
        self._params = params if params is not None else SequenceParams()
        self._digits_budget = self._params.digits_for(self._base)
        self._total = self._base**self._digits_budget - 1
        self._float = self._params.float_dtype
        self._jump(start)

    @property
    def base(self):
        return self._base

    @property
    def params(self):
        return self._params

    @property
    def digits(self):
        return self._digits_budget

    @property
    def total(self):
        """Length of the whole sequence, ``base**digits - 1``."""
        return self._total

    @property
    def index(self):
        """Index of the element the next call to `next` returns."""
        return self._index

    def _jump(self, index):
        if index < 0:
            raise ValueError("Expected a non-negative index but got {}".format(index))
        index = min(int(index), self._total)
        b = self._base
        d = [0] * self._digits_budget
        r = [0.0] * self._digits_budget
        n = index
        top = 0
        while n > 0:
            d[top] = n % b
            n //= b
            top += 1
        for i in range(top - 1, 0, -1):
            r[i - 1] = (d[i] + r[i]) / b
        self._index = index
        self._digits = d
        self._partial = r

    def __iter__(self):
        return self

    def __next__(self):
        if self._index >= self._total:
            raise StopIteration
        b = self._base
        d = self._digits
        r = self._partial

        l = 0
        while d[l] == b - 1:
            d[l] = 0
            l += 1
        d[l] += 1
        for i in range(l, 0, -1):
            r[i - 1] = (d[i] + r[i]) / b

        self._index += 1
        return self._float((d[0] + r[0]) / b)

    @property
    def remaining(self):
        """Exact number of elements left."""
        return self._total - self._index

    def __len__(self):
        return self.remaining

    def skip(self, k):
        """
        Advance past `k` elements without producing them.

        Returns the iterator itself. Skipping past the end leaves it exhausted.
        """
        if k < 0:
            raise ValueError("Expected a non-negative skip but got {}".format(k))
        self._jump(min(self._index + k, self._total))
        return self

    def nth(self, k, default=None):
        """
        Discard `k` elements and return the next one.

        Returns `default` when fewer than ``k + 1`` elements remain, in which
        case the iterator is left exhausted.
        """
        self.skip(k)
        return next(self, default)

    def at(self, index, default=None):
        """
        Return the element at absolute position `index` without moving.
        """
        if index < 0:
            raise ValueError("Expected a non-negative index but got {}".format(index))
        if index >= self._total:
            return default
        return number(self._base, index, self._float)

    def count(self):
        """
        Exhaust the iterator and return how many elements it had left.
        """
        remaining = self.remaining
        self._jump(self._total)
        return remaining

    def last(self, default=None):
        """
        Exhaust the iterator and return its final element.
        """
        if self.remaining == 0:
            return default
        self._jump(self._total)
        return number(self._base, self._total - 1, self._float)

    def copy(self):
        """
        Return an independent iterator positioned at the same element.
        """
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._digits = list(self._digits)
        clone._partial = list(self._partial)
        return clone

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __repr__(self):
        return "{}(base={}, index={}, total={})".format(
            self.__class__.__name__, self._base, self._index, self._total
        )

class Sequence(GenericSequence):
    """
    Halton sequence with the default configuration: as many digits as fit in
    an unsigned 32 bit index, with float64 values.
    """
    def __init__(self, base, start=0):
        super().__init__(base, SequenceParams(), start)

if __name__ == "__main__":
    import jax
    from plot_summary import plot_sequence

    seq = halton_sequence(100, 2)
    print(seq)
    plot_sequence(seq, jax.random.uniform(jax.random.PRNGKey(48279), (100,)))
