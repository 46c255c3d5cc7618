"""Tests for domain.profiles module."""

import pytest

from domain.models import ContourSettings, DensitySettings, Profile
from domain.profiles import load_profile, save_profile


class TestProfiles:
    """Tests for load_profile and save_profile functions."""

    def test_round_trip(self, tmp_path):
        """Saved profile loads back equal."""
        profile = Profile(
            contours=ContourSettings(thresholds=[2.5, 7.5], smoothing=False, workers=2),
            density=DensitySettings(width=100, height=50, bandwidth=5.5),
        )
        path = save_profile(tmp_path / 'profile.toml', profile)
        assert path.exists()
        assert load_profile(path) == profile

    def test_none_size_not_written(self, tmp_path):
        """Unset grid size is left out of the file and stays None."""
        path = save_profile(tmp_path / 'profile.toml', Profile())
        text = path.read_text(encoding='utf-8')
        assert 'width' in text  # density section
        loaded = load_profile(path)
        assert loaded.contours.width is None
        assert loaded.contours.height is None

    def test_missing_file(self, tmp_path):
        """Missing profile should raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_profile(tmp_path / 'nope.toml')

    def test_partial_profile(self, tmp_path):
        """Keys not in the file take their defaults."""
        path = tmp_path / 'partial.toml'
        path.write_text('[contours]\nthresholds = 5\n', encoding='utf-8')
        profile = load_profile(path)
        assert profile.contours.thresholds == 5
        assert profile.contours.smoothing is True
        assert profile.density == DensitySettings()

    def test_invalid_value(self, tmp_path):
        """Invalid values should raise ValueError."""
        path = tmp_path / 'bad.toml'
        path.write_text('[density]\ncell_size = 0\n', encoding='utf-8')
        with pytest.raises(ValueError):
            load_profile(path)

    def test_str_path(self, tmp_path):
        """String paths are accepted."""
        path = tmp_path / 'profile.toml'
        save_profile(str(path), Profile())
        assert load_profile(str(path)) == Profile()
