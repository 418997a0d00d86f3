from cpzk.utils.misc import ensure_bn
from cpzk.utils.rand import RandomSource, SystemRandomSource, SequenceRandomSource
