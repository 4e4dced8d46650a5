# EMSA1 message encoding into prime fields, as used for the message
# representative of ECDSA and other prime field signature schemes.

# Pure Python big integers: the bit manipulation and field reduction are not
# constant time, only the comparison done on verification is.

__version__ = "0.1.0"

from . import curves, hashes
from .emsa1 import EMSA1, encode, verify
from .exceptions import ConfigurationError, VectorMismatch
from .field import PrimeField, fe
from .util import bits2int
