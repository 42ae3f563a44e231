"""a competitor's rating and the conversions between the public and Glicko-2 scales"""
from enum import Enum
from typing import Optional
from glickopy.core.system import RatingSystem
from glickopy.utils.constants import GLICKO2_SCALE
from glickopy.utils.math_utils import isclose


class Result(float, Enum):
    """outcome of a match from the point of view of the rated competitor, usable directly as a score"""

    WIN = 1.0
    LOSS = 0.0
    DRAW = 0.5


class Rating:
    """
    A competitor's rating, rating deviation and volatility, along with the RatingSystem it was created under.

    Ratings are on the public (Glicko-1 like) scale unless they were produced by to_internal().
    The system is shared by reference and never copied.
    """

    __slots__ = ('rating', 'deviation', 'volatility', 'system')

    def __init__(
        self,
        rating: Optional[float] = None,
        deviation: Optional[float] = None,
        volatility: Optional[float] = None,
        system: Optional[RatingSystem] = None,
    ):
        """
        Creates a rating, any value left as None is taken from the system defaults.

        Parameters:
            rating (float, optional): skill estimate. Defaults to system.base_rating.
            deviation (float, optional): uncertainty in the rating. Defaults to system.base_deviation.
            volatility (float, optional): expected fluctuation in performance. Defaults to system.base_volatility.
            system (RatingSystem, optional): the parameters this rating belongs to. Defaults to RatingSystem().
        """
        if system is None:
            system = RatingSystem.default()
        self.system = system
        self.rating = float(system.base_rating if rating is None else rating)
        self.deviation = float(system.base_deviation if deviation is None else deviation)
        self.volatility = float(system.base_volatility if volatility is None else volatility)

    @classmethod
    def default(cls, system: Optional[RatingSystem] = None):
        """a rating with all values taken from the system defaults"""
        return cls(system=system)

    def to_internal(self):
        return to_internal(self)

    def to_public(self):
        return to_public(self)

    def get_values(self):
        """returns the rating, deviation, and volatility"""
        return self.rating, self.deviation, self.volatility

    def get_system(self) -> RatingSystem:
        return self.system

    def copy(self):
        return Rating(self.rating, self.deviation, self.volatility, self.system)

    def isclose(self, other, epsilon: float = 1e-4) -> bool:
        """true if all three values are within epsilon of the other rating's values"""
        return (
            isclose(self.rating, other.rating, epsilon)
            and isclose(self.deviation, other.deviation, epsilon)
            and isclose(self.volatility, other.volatility, epsilon)
        )

    def __repr__(self):
        return (
            f'Rating(rating={self.rating!r}, deviation={self.deviation!r}, '
            f'volatility={self.volatility!r}, system={self.system!r})'
        )

    def __str__(self):
        return f'{{Rating[{self.rating:.3f}] Deviation[{self.deviation:.3f}] Volatility[{self.volatility:.3f}]}}'


def to_internal(rating: Rating) -> Rating:
    """new rating converted from the public scale to the Glicko-2 scale, centered at 0"""
    return Rating(
        (rating.rating - rating.system.base_rating) / GLICKO2_SCALE,
        rating.deviation / GLICKO2_SCALE,
        rating.volatility,
        rating.system,
    )


def to_public(rating: Rating) -> Rating:
    """new rating converted from the Glicko-2 scale back to the public scale"""
    return Rating(
        rating.rating * GLICKO2_SCALE + rating.system.base_rating,
        rating.deviation * GLICKO2_SCALE,
        rating.volatility,
        rating.system,
    )
