class SparrayError(Exception):
    """base class for every error raised by sparray"""
    pass


class InvalidSparrayDataError(SparrayError, TypeError):
    """the constructor received something that is not an ordered sequence"""
    pass


class InvalidStepError(SparrayError, ValueError):
    """range step is zero or points away from the end"""
    pass


class InvalidTimesError(SparrayError, ValueError):
    """repeat was asked for a negative number of copies"""
    pass


class InvalidWindowError(SparrayError, ValueError):
    """sliding window size or step is smaller than one"""
    pass


class InvalidSampleSizeError(SparrayError, ValueError):
    """sample size is negative"""
    pass


class OversampleError(InvalidSampleSizeError):
    """more draws than elements were requested without replacement"""
    pass


class InvalidBinsError(SparrayError, ValueError):
    """histogram bin count is not a positive integer"""
    pass


class InvalidHistogramRangeError(SparrayError, ValueError):
    """histogram lower bound is above the upper bound"""
    pass


class EmptyReduceError(SparrayError, TypeError):
    """reduce of an empty sparray without an initial value"""
    pass
