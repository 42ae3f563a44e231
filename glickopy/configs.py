from typing import Optional
from glickopy.core.system import RatingSystem

rating_systems = ['default', 'glickman_example', 'volatile', 'chess']

rating_system_params = {
    'default': {
        'base_rating': 1500.0,
        'base_deviation': 350.0,
        'base_volatility': 0.06,
        'tau': 0.3,
    },
    # the worked example in http://www.glicko.net/glicko/glicko2.pdf
    'glickman_example': {
        'base_rating': 1500.0,
        'base_deviation': 350.0,
        'base_volatility': 0.06,
        'tau': 0.5,
    },
    'volatile': {
        'base_rating': 1500.0,
        'base_deviation': 350.0,
        'base_volatility': 0.09,
        'tau': 1.2,
    },
    'chess': {
        'base_rating': 1500.0,
        'base_deviation': 350.0,
        'base_volatility': 0.06,
        'tau': 0.75,
    },
}


def get_rating_system(name: str = 'default', overrides: Optional[dict] = None) -> RatingSystem:
    """build the RatingSystem for a named preset, optionally overriding some of its parameters"""
    if name not in rating_system_params:
        raise ValueError(f'Unknown rating system preset {name}, expected one of {rating_systems}')
    params = {**rating_system_params[name], **(overrides or {})}
    return RatingSystem.from_config(params)
