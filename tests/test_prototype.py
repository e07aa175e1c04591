"""Tests for the prototype demo."""

from pattern_catalog.creational.prototype import Prototype, main


class TestPrototype:
    def test_clone_is_equal_but_distinct(self):
        original = Prototype("Original", 42)

        clone = original.clone()

        assert clone == original
        assert clone is not original

    def test_clone_is_independent(self):
        """Changing the clone leaves the original untouched."""
        original = Prototype("Original", 42)
        clone = original.clone()

        clone.name = "Clone"
        clone.value = 99

        assert str(original) == "Prototype [name=Original, value=42]"
        assert str(clone) == "Prototype [name=Clone, value=99]"


class TestDemo:
    def test_main_output(self, narrator):
        main(narrator)

        assert narrator.lines == [
            "Original Object: Prototype [name=Original, value=42]",
            "Cloned Object: Prototype [name=Clone, value=99]",
        ]
