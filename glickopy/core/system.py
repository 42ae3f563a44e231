"""the parameters shared by every rating created under one Glicko-2 system"""
import logging
from typing import Mapping, Optional
from glickopy.utils.constants import (
    DEFAULT_RATING,
    DEFAULT_DEVIATION,
    DEFAULT_VOLATILITY,
    DEFAULT_TAU,
    TAU_RANGE,
)

logger = logging.getLogger(__name__)


class RatingSystem:
    """
    Immutable configuration for a Glicko-2 rating system.

    Many Ratings hold a reference to the same RatingSystem. It supplies the public scale
    center used for scale conversion and the upper clamp applied to deviations after an update.

    Attributes:
        base_rating (float): Default public scale rating of a new competitor.
        base_deviation (float): Default public scale deviation, also the maximum deviation after an update.
        base_volatility (float): Default volatility of a new competitor.
        tau (float): Constrains the change in volatility over time, usually between 0.3 and 1.2.
    """

    __slots__ = ('_base_rating', '_base_deviation', '_base_volatility', '_tau')

    def __init__(
        self,
        base_rating: float = DEFAULT_RATING,
        base_deviation: float = DEFAULT_DEVIATION,
        base_volatility: float = DEFAULT_VOLATILITY,
        tau: float = DEFAULT_TAU,
    ):
        object.__setattr__(self, '_base_rating', float(base_rating))
        object.__setattr__(self, '_base_deviation', float(base_deviation))
        object.__setattr__(self, '_base_volatility', float(base_volatility))
        object.__setattr__(self, '_tau', float(tau))
        if not TAU_RANGE[0] <= self._tau <= TAU_RANGE[1]:
            logger.warning(
                'tau=%s is outside of the usual range [%s, %s], volatility updates may be unstable',
                self._tau,
                TAU_RANGE[0],
                TAU_RANGE[1],
            )

    @classmethod
    def default(cls):
        return cls()

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, float]] = None):
        """
        Builds a RatingSystem from a mapping of parameter names to values.

        Parameters:
            config (Mapping, optional): may contain base_rating, base_deviation, base_volatility and tau.
                                        Missing keys fall back to the defaults.

        Raises:
            ValueError: if the mapping contains a key that is not a rating system parameter.
        """
        config = dict(config or {})
        unknown = set(config) - {'base_rating', 'base_deviation', 'base_volatility', 'tau'}
        if unknown:
            raise ValueError(f'Unknown rating system parameters: {sorted(unknown)}')
        return cls(**config)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @property
    def base_rating(self) -> float:
        return self._base_rating

    @property
    def base_deviation(self) -> float:
        return self._base_deviation

    @property
    def base_volatility(self) -> float:
        return self._base_volatility

    @property
    def tau(self) -> float:
        return self._tau

    def get_values(self):
        """returns the base rating, deviation, volatility, and tau"""
        return self._base_rating, self._base_deviation, self._base_volatility, self._tau

    def __eq__(self, other):
        if not isinstance(other, RatingSystem):
            return NotImplemented
        return self.get_values() == other.get_values()

    def __hash__(self):
        return hash(self.get_values())

    def __repr__(self):
        return (
            f'RatingSystem(base_rating={self._base_rating}, base_deviation={self._base_deviation}, '
            f'base_volatility={self._base_volatility}, tau={self._tau})'
        )
