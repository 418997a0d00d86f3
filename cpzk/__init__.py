__version__ = "0.1.0"
__title__ = "cpzk"
__author__ = "cpzk contributors"
__email__ = "cpzk@users.noreply.github.com"
__url__ = "https://github.com/cpzk/cpzk"
__license__ = "MIT"
__description__ = "Chaum-Pedersen proofs of discrete-logarithm equality over prime-order subgroups."
__copyright__ = "2020, cpzk contributors"


from cpzk.group import GroupParams
from cpzk.engine import ChaumPedersen, exponentiate, generate_random_below
from cpzk.utils.rand import RandomSource, SystemRandomSource, SequenceRandomSource
