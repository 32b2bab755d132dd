from pathlib import Path

import pytest

from openapi_splitter.errors import NameCollisionError
from openapi_splitter.splitter.normalize import normalize_name, unique_file_names


class TestNormalizeName:
    def test_route_with_path_param(self):
        assert normalize_name("/pets/{petId}") == "pets_petId_"

    def test_plain_name_unchanged(self):
        assert normalize_name("Pet") == "Pet"

    def test_strips_only_one_leading_slash(self):
        assert normalize_name("//pets") == "_pets"

    def test_collapses_underscore_runs(self):
        assert normalize_name("a.-_b") == "a_b"

    def test_keeps_case(self):
        assert normalize_name("/Users/{UserID}") == "Users_UserID_"

    def test_non_ascii_replaced(self):
        assert normalize_name("Café") == "Caf_"

    def test_root_route(self):
        assert normalize_name("/") == "root"

    @pytest.mark.parametrize("key", ["/pets/{petId}", "//x", "a..b", "/", "Pet.v2", "_x_", "über/ß"])
    def test_idempotent(self, key):
        once = normalize_name(key)
        assert normalize_name(once) == once


class TestUniqueFileNames:
    def test_maps_keys_to_names(self):
        names = unique_file_names(["/pets", "/pets/{petId}"], "paths", Path("api.yaml"))
        assert names == {"/pets": "pets", "/pets/{petId}": "pets_petId_"}

    def test_collision_raises(self):
        with pytest.raises(NameCollisionError) as exc_info:
            unique_file_names(["/pets/{petId}", "/pets/_petId_"], "paths", Path("api.yaml"))
        assert exc_info.value.registry == "paths"
        assert exc_info.value.names == ("/pets/{petId}", "/pets/_petId_")
        assert "pets_petId_" in str(exc_info.value)

    def test_repeated_key_is_not_a_collision(self):
        names = unique_file_names(["pets", "pets"], "tags", Path("api.yaml"))
        assert names == {"pets": "pets"}

    def test_reserved_name_raises(self):
        with pytest.raises(NameCollisionError) as exc_info:
            unique_file_names(["Pet", "__index"], "schemas", Path("api.yaml"), reserved=("_index",))
        assert exc_info.value.names[0] == "__index"
        assert "_index" in str(exc_info.value)

    def test_reserved_name_free_without_reservation(self):
        assert unique_file_names(["_index"], "paths", Path("api.yaml")) == {"_index": "_index"}
