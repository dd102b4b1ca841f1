import logging
import time
from typing import Optional

from ..crypto import CryptoSource
from ..deterministic import DeterministicSource
from ..errors import NotAvailableError
from ..mersenne_twister import MT32Source, MT64Source
from ..protocol_constants import DEFAULT_SEED
from ..simple import SimpleSource
from ..source import ISource
from ..utils import EnvironmentManager, EnvironmentVariables
from .Rand import Rand
from .SourceKind import SourceKind
from .abstract.IRandFactory import IRandFactory

logger = logging.getLogger(__name__)


class RandFactory(IRandFactory):
    """Implementation of the random number generator factory."""

    @staticmethod
    def new(source: ISource) -> Rand:
        if source is None:
            raise ValueError("Source must not be None")
        source.assert_available()
        error = source.err()
        if error is not None:
            logger.error("%s failed its availability check: %s", type(source).__name__, error)
            raise NotAvailableError("rand source", error) from error
        return Rand(source)

    @staticmethod
    def new_crypto_rand(source: Optional[CryptoSource] = None) -> Rand:
        return RandFactory.new(source if source is not None else CryptoSource())

    @staticmethod
    def new_pseudo_random_rand() -> Rand:
        return RandFactory.new(DeterministicSource(time.time_ns()))

    @staticmethod
    def new_deterministic_rand() -> Rand:
        return RandFactory.new(DeterministicSource(DEFAULT_SEED))

    @staticmethod
    def new_source(kind: SourceKind) -> ISource:
        if kind is SourceKind.CRYPTO:
            return CryptoSource()
        if kind is SourceKind.PSEUDO:
            return DeterministicSource(time.time_ns())
        if kind is SourceKind.DETERMINISTIC:
            return DeterministicSource()
        if kind is SourceKind.MT32:
            return MT32Source()
        if kind is SourceKind.MT64:
            return MT64Source()
        if kind is SourceKind.SIMPLE:
            return SimpleSource()
        raise ValueError(f"Unsupported source kind: {kind}")

    @staticmethod
    def new_default_rand() -> Rand:
        """
        Create a random number generator from the environment configuration.

        RAND_SOURCE selects the SourceKind (default "crypto"). If RAND_SEED is set,
        it seeds the source; the crypto source ignores it.

        Returns:
            Rand: A random number generator using the configured source

        Raises:
            ValueError: If RAND_SOURCE names an unknown source kind
            NotAvailableError: If the configured source is not available
        """
        name = EnvironmentManager.get_string(EnvironmentVariables.RAND_SOURCE)
        try:
            kind = SourceKind(name.lower())
        except ValueError:
            raise ValueError(f"Unknown random source kind: {name!r}") from None

        source = RandFactory.new_source(kind)
        seed = EnvironmentManager.get_int(EnvironmentVariables.RAND_SEED)
        if seed is not None:
            source.seed(seed)
        logger.debug("Using %s source (seed=%s)", kind.value, seed)
        return RandFactory.new(source)
