"""Tests for chunk-wise slug generation"""

import pytest

from slugren.lib.fs.slug import slugify_chunk, slugify_name


class TestSlugifyChunk:
    def test_underscore_becomes_separator(self):
        assert slugify_chunk("foo_bar") == "foo-bar"

    def test_case_preserved(self):
        assert slugify_chunk("My_File") == "My-File"
        assert slugify_chunk("TXT") == "TXT"

    def test_lowercase_option(self):
        assert slugify_chunk("My_File", maintain_case=False) == "my-file"

    def test_custom_separator(self):
        assert slugify_chunk("my file", separator="+") == "my+file"

    def test_transliteration(self):
        assert slugify_chunk("Über Café") == "Uber-Cafe"

    def test_empty_chunk(self):
        assert slugify_chunk("") == ""


class TestSlugifyName:
    @pytest.mark.parametrize("name,expected", [
        ("foo_bar.txt", "foo-bar.txt"),
        ("My_File.TXT", "My-File.TXT"),
        ("archive.tar.gz", "archive.tar.gz"),
        ("Holiday Photos 2024.JPG", "Holiday-Photos-2024.JPG"),
        ("README", "README"),
        ("read me", "read-me"),
    ])
    def test_names(self, name, expected):
        assert slugify_name(name) == expected

    def test_hidden_file_keeps_empty_first_chunk(self):
        assert slugify_name(".bashrc") == ".bashrc"
        assert slugify_name(".my config") == ".my-config"

    def test_chunks_slugified_separately(self):
        assert slugify_name("a b.c d.e_f") == "a-b.c-d.e-f"

    def test_idempotent(self):
        for name in ["My_File.TXT", "Über Café.tar.gz", "a  b__c.d", ".x y"]:
            once = slugify_name(name)
            assert slugify_name(once) == once
