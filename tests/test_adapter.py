"""Tests for the legacy service adapter."""

from unittest.mock import MagicMock

from pattern_catalog.structural.adapter import AdapterService, OldService, TargetService, main


class TestAdapterService:
    def test_request_forwards_to_old_request(self):
        old = MagicMock(spec=OldService)

        AdapterService(old).request()

        old.old_request.assert_called_once_with()

    def test_adapter_is_target_service(self, narrator):
        assert isinstance(AdapterService(OldService(narrator)), TargetService)

    def test_old_service_is_not_target_service(self, narrator):
        """The legacy class does not speak the new interface on its own."""
        assert not isinstance(OldService(narrator), TargetService)


class TestDemo:
    def test_main_output(self, narrator):
        main(narrator)

        assert narrator.lines == ["OldService: handling legacy request"]
