"""Tests for the connection probe and credential sources."""

from vibenav.clients.base import ProviderError
from vibenav.services.credentials import EnvironmentCredential, HostCredential, UserCredential
from vibenav.services.probe import PROBE_PROMPT, ConnectionProbe

from .conftest import FakeProvider


class TestConnectionProbe:

    def test_text_response_is_valid(self):
        provider = FakeProvider(text="Hello")

        assert ConnectionProbe(provider, model="cheap-model").probe("key") is True

        _, sent = provider.calls[0]
        assert sent.model == "cheap-model"
        assert sent.contents.text == PROBE_PROMPT
        assert sent.response_format == "text"
        assert sent.schema is None

    def test_empty_text_is_invalid(self):
        assert ConnectionProbe(FakeProvider(text="")).probe("key") is False
        assert ConnectionProbe(FakeProvider(text=None)).probe("key") is False

    def test_provider_error_returns_false(self):
        provider = FakeProvider(error=ProviderError("API key not valid", status=400))

        assert ConnectionProbe(provider).probe("bad-key") is False

    def test_arbitrary_exception_returns_false(self):
        provider = FakeProvider(error=RuntimeError("boom"))

        assert ConnectionProbe(provider).probe("key") is False

    def test_empty_credential_skips_network(self):
        provider = FakeProvider(text="Hello")

        assert ConnectionProbe(provider).probe("") is False
        assert ConnectionProbe(provider).probe(None) is False
        assert provider.calls == []


class TestEnvironmentCredential:

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("VIBENAV_TEST_KEY", "abc")

        assert EnvironmentCredential("VIBENAV_TEST_KEY").get() == "abc"

    def test_missing_env(self, monkeypatch):
        monkeypatch.delenv("VIBENAV_TEST_KEY", raising=False)

        assert EnvironmentCredential("VIBENAV_TEST_KEY").get() is None

    def test_invalidate(self, monkeypatch):
        monkeypatch.setenv("VIBENAV_TEST_KEY", "abc")
        source = EnvironmentCredential("VIBENAV_TEST_KEY")

        source.invalidate()

        assert source.get() is None


class TestHostCredential:

    def test_supplier_value(self):
        assert HostCredential(lambda: "host-key").get() == "host-key"

    def test_invalidate_blocks_only_rejected_key(self):
        keys = ["old-key"]
        source = HostCredential(lambda: keys[0])

        source.invalidate()
        assert source.get() is None

        keys[0] = "new-key"
        assert source.get() == "new-key"


class TestUserCredential:

    def test_submit_valid_key_persists(self, vault):
        source = UserCredential(vault, ConnectionProbe(FakeProvider(text="OK")))

        assert source.submit("  new-key ") is True
        assert source.get() == "new-key"
        assert vault.load() == "new-key"

    def test_submit_invalid_key_not_persisted(self, vault):
        source = UserCredential(vault, ConnectionProbe(FakeProvider(error=ProviderError("denied", 403))))

        assert source.submit("bad-key") is False
        assert source.get() is None
        assert vault.load() is None

    def test_restore_probes_stored_key(self, vault):
        vault.save("stored-key")
        provider = FakeProvider(text="OK")
        source = UserCredential(vault, ConnectionProbe(provider))

        assert source.restore() is True
        assert source.get() == "stored-key"
        assert provider.calls[0][0] == "stored-key"

    def test_restore_with_failing_key(self, vault):
        vault.save("stale-key")
        source = UserCredential(vault, ConnectionProbe(FakeProvider(text="")))

        assert source.restore() is False
        assert source.get() is None

    def test_restore_without_stored_key(self, vault):
        provider = FakeProvider(text="OK")
        source = UserCredential(vault, ConnectionProbe(provider))

        assert source.restore() is False
        assert provider.calls == []

    def test_invalidate_keeps_vault(self, vault):
        source = UserCredential(vault, ConnectionProbe(FakeProvider(text="OK")))
        source.submit("key")

        source.invalidate()

        assert source.get() is None
        assert source.is_validated is False
        assert vault.load() == "key"

    def test_clear_wipes_vault(self, vault):
        source = UserCredential(vault, ConnectionProbe(FakeProvider(text="OK")))
        source.submit("key")

        source.clear()

        assert source.get() is None
        assert vault.load() is None

    def test_revalidate_after_invalidate(self, vault):
        provider = FakeProvider(text="OK")
        source = UserCredential(vault, ConnectionProbe(provider))
        source.submit("key")
        source.invalidate()

        assert source.revalidate() is True
        assert source.get() == "key"
        assert provider.calls[-1][0] == "key"

    def test_revalidate_failure_stays_invalid(self, vault):
        provider = FakeProvider(text="OK")
        source = UserCredential(vault, ConnectionProbe(provider))
        source.submit("key")
        source.invalidate()

        provider.text = ""
        assert source.revalidate() is False
        assert source.get() is None
        assert vault.load() == "key"

    def test_revalidate_falls_back_to_vault(self, vault):
        vault.save("stored-key")
        source = UserCredential(vault, ConnectionProbe(FakeProvider(text="OK")))

        assert source.revalidate() is True
        assert source.get() == "stored-key"
