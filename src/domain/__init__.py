"""Domain layer - settings models and profiles."""
from domain.models import ContourSettings, DensitySettings, Profile
from domain.profiles import load_profile, save_profile

__all__ = [
    'ContourSettings',
    'DensitySettings',
    'Profile',
    'load_profile',
    'save_profile',
]
