"""Unit tests for the default code generator."""

import string

import pytest

from betagate.domain.service import RandomCodeGenerator


class TestRandomCodeGenerator:
    """Tests for RandomCodeGenerator."""

    @pytest.mark.asyncio
    async def test_default_code_is_32_latin_letters(self):
        generator = RandomCodeGenerator()

        code = await generator.generate("a@x.com")

        assert len(code) == 32
        assert set(code) <= set(string.ascii_letters)

    @pytest.mark.asyncio
    async def test_custom_length(self):
        generator = RandomCodeGenerator(length=12)

        code = await generator.generate(None)

        assert len(code) == 12

    @pytest.mark.asyncio
    async def test_codes_differ(self):
        generator = RandomCodeGenerator()

        codes = {await generator.generate(None) for _ in range(50)}

        assert len(codes) == 50

    def test_non_positive_length_rejected(self):
        with pytest.raises(ValueError):
            RandomCodeGenerator(length=0)
