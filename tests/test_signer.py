"""Tests for request signing."""

import base64

import pytest
from pydantic import SecretStr

from kraken_sdk import EncodingError, sign
from kraken_sdk.signer import decode_secret

# Secret from Kraken's published signing example
SECRET = "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="


class TestSign:
    """Test the API-Sign construction."""

    def test_kraken_documented_vector(self):
        """Reproduce the example from Kraken's authentication docs."""
        params = {
            "nonce": 1616492376594,
            "ordertype": "limit",
            "pair": "XBTUSD",
            "price": 37500,
            "type": "buy",
            "volume": "1.25",
        }
        signature = sign("/0/private/AddOrder", params, 1616492376594, SECRET)
        assert signature == (
            "4/dpxb3iT4tp/ZCVEwSnEsLxx0bqyhLpdfOpc6fn7OR8+UClSV5n9E6aSS8MPtnRfp32bAb0nmbRn6H8ndwLUQ=="
        )

    def test_balance_vector(self):
        """Pinned vector for a nonce-only Balance request."""
        nonce = 1616161616000000
        signature = sign("/0/private/Balance", {"nonce": nonce}, nonce, SECRET)
        assert signature == (
            "NslA+mfnqRl90tz0BxbVMsxt0HCJUlJ0yT8dRFNhMKwP8cLnA2qWBE+DLN0Mz4ZPo0sqvUSlIldcidpG1nD/yQ=="
        )

    def test_deterministic(self):
        """Same inputs give the same signature."""
        params = {"nonce": 42, "pair": "XBTUSD"}
        first = sign("/0/private/OpenOrders", params, 42, SECRET)
        second = sign("/0/private/OpenOrders", dict(params), 42, SECRET)
        assert first == second

    def test_inputs_change_signature(self):
        """Path, nonce and params all feed into the signature."""
        base = sign("/0/private/Balance", {"nonce": 1}, 1, SECRET)
        assert sign("/0/private/Ledgers", {"nonce": 1}, 1, SECRET) != base
        assert sign("/0/private/Balance", {"nonce": 1}, 2, SECRET) != base
        assert sign("/0/private/Balance", {"nonce": 1, "asset": "XBT"}, 1, SECRET) != base

    def test_nonce_as_string_matches_int(self):
        """The nonce is concatenated as its decimal string."""
        params = {"nonce": 1616161616000000}
        assert sign("/0/private/Balance", params, "1616161616000000", SECRET) == sign(
            "/0/private/Balance", params, 1616161616000000, SECRET
        )

    def test_accepts_secret_str_and_bytes(self):
        """SecretStr and bytes secrets sign identically to str."""
        expected = sign("/0/private/Balance", {"nonce": 7}, 7, SECRET)
        assert sign("/0/private/Balance", {"nonce": 7}, 7, SecretStr(SECRET)) == expected
        assert sign("/0/private/Balance", {"nonce": 7}, 7, SECRET.encode()) == expected

    def test_output_is_base64_sha512(self):
        """Signature decodes to a 64-byte HMAC-SHA512 digest."""
        signature = sign("/0/private/Balance", {"nonce": 1}, 1, SECRET)
        assert len(base64.b64decode(signature)) == 64


class TestSecretDecoding:
    """Test secret validation."""

    @pytest.mark.parametrize(
        "bad_secret",
        ["not base64!", "abc", "kQH5HW/8p1uGOVjbgWA7Fun$AmGO8lsSUXNsu3eow76sz84Q=="],
    )
    def test_malformed_secret_raises(self, bad_secret):
        """Malformed base64 is rejected instead of used as key material."""
        with pytest.raises(EncodingError):
            sign("/0/private/Balance", {"nonce": 1}, 1, bad_secret)

    def test_decode_secret(self):
        """Valid secrets decode to raw bytes."""
        assert decode_secret(base64.b64encode(b"secret-bytes").decode()) == b"secret-bytes"
