"""
Tests for the identifier registry and asset providers.
"""

import pytest

from skyculture.assets import FileAssetProvider, MemoryAssetProvider, skyculture_asset
from skyculture.errors import AssetNotFoundError
from skyculture.identifiers import IdentifierRegistry, hd_key, load_registry


class TestIdentifierRegistry:

    def test_alias_lookup_is_case_insensitive(self):
        registry = IdentifierRegistry({"Alp Ori": "HD 39801"})

        assert registry.resolve("Alp Ori") == "HD 39801"
        assert registry.resolve("alp ori") == "HD 39801"
        assert registry.resolve("Bet Ori") is None

    def test_hd_key_resolves_to_itself(self):
        assert IdentifierRegistry().resolve(hd_key(39801)) == "HD 39801"

    def test_registered_values_resolve(self):
        registry = IdentifierRegistry()
        registry.register("HD 39801", "NAME", "Betelgeuse")
        registry.register("HD 39801", "NAME", "Betelgeuse")

        assert registry.values("HD 39801") == ["Betelgeuse"]
        assert registry.resolve("BETELGEUSE") == "HD 39801"

    def test_values_filtered_by_kind(self):
        registry = IdentifierRegistry()
        registry.register("HD 39801", "NAME", "Betelgeuse")
        registry.register("HD 39801", "BAYER", "Alp Ori")

        assert registry.values("HD 39801", "BAYER") == ["Alp Ori"]


class TestLoadRegistry:

    def test_load_from_yaml(self, tmp_path):
        yaml_file = tmp_path / "identifiers.yaml"
        yaml_file.write_text('identifiers:\n  "Alp Ori": "HD 39801"\n  "Bet Ori": "HD 34085"\n')

        registry = load_registry(str(yaml_file))

        assert len(registry) == 2
        assert registry.resolve("Bet Ori") == "HD 34085"

    def test_missing_file_gives_empty_registry(self):
        registry = load_registry("/nonexistent/identifiers.yaml")
        assert len(registry) == 0

    def test_invalid_structure(self, tmp_path):
        yaml_file = tmp_path / "identifiers.yaml"
        yaml_file.write_text("identifiers:\n  - Alp Ori\n")

        with pytest.raises(ValueError):
            load_registry(str(yaml_file))


class TestAssetProviders:

    def test_file_provider_reads_asset_url(self, tmp_path):
        culture_dir = tmp_path / "skycultures" / "western"
        culture_dir.mkdir(parents=True)
        (culture_dir / "names.txt").write_bytes(b"39801 Betelgeuse\n")

        provider = FileAssetProvider(str(tmp_path))

        assert provider.get_asset(skyculture_asset("western", "names.txt")) == b"39801 Betelgeuse\n"

    def test_file_provider_missing_asset(self, tmp_path):
        provider = FileAssetProvider(str(tmp_path))

        with pytest.raises(AssetNotFoundError) as exc_info:
            provider.get_asset("asset://skycultures/western/names.txt")

        assert exc_info.value.code == "ASSET.NOT_FOUND"

    def test_file_provider_stays_in_root(self, tmp_path):
        (tmp_path / "secret.txt").write_text("x")
        provider = FileAssetProvider(str(tmp_path / "assets"))

        with pytest.raises(AssetNotFoundError):
            provider.get_asset("asset://../secret.txt")

    def test_memory_provider(self):
        provider = MemoryAssetProvider({"asset://a.txt": "text"})

        assert provider.get_asset("asset://a.txt") == b"text"
        with pytest.raises(AssetNotFoundError):
            provider.get_asset("asset://b.txt")
