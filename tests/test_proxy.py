"""Tests for the lazy image proxy."""

from unittest.mock import patch

from pattern_catalog.structural.proxy import Image, ProxyImage, RealImage, main


class TestProxyImage:
    def test_not_loaded_until_display(self, narrator):
        proxy = ProxyImage("a.jpg", narrator)

        assert proxy.is_loaded is False
        assert narrator.lines == []

    def test_loads_once(self, narrator):
        """Only the first display() loads the image."""
        proxy = ProxyImage("a.jpg", narrator)

        with patch("pattern_catalog.structural.proxy.RealImage", wraps=RealImage) as real:
            proxy.display()
            proxy.display()

        real.assert_called_once_with("a.jpg", narrator)
        assert narrator.lines == ["Loading a.jpg", "Displaying a.jpg", "Displaying a.jpg"]

    def test_real_image_loads_eagerly(self, narrator):
        RealImage("b.png", narrator)

        assert narrator.lines == ["Loading b.png"]

    def test_both_are_images(self, narrator):
        assert isinstance(ProxyImage("x", narrator), Image)
        assert isinstance(RealImage("x", narrator), Image)


class TestDemo:
    def test_main_output(self, narrator):
        main(narrator)

        assert narrator.lines == [
            "Displaying first image...",
            "Loading Photo1.jpg",
            "Displaying Photo1.jpg",
            "Displaying second image...",
            "Loading Photo2.jpg",
            "Displaying Photo2.jpg",
            "Displaying first image again...",
            "Displaying Photo1.jpg",
        ]
