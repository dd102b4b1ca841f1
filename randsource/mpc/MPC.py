import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, RandomState


class MPC(IMPC):
    """Implementation of the multi-precision random primitives on top of gmpy2."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def random_state(seed: int) -> RandomState:
        if seed < 0:
            raise ValueError("Random state seed must be non-negative")
        return gmpy2.random_state(MPC.mpz(seed))

    @staticmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> int:
        return int(gmpy2.mpz_urandomb(state, bit_count))
