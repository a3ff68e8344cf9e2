"""NPC Customs contract client (Ethereum JSON-RPC)."""

import logging
import time

import requests

from ..errors import DataFormatError, UpstreamLookupError

logger = logging.getLogger(__name__)

# keccak256("tokenTraitsById(uint256)")[:4]
TOKEN_TRAITS_SELECTOR = "0x97b35160"

# Trait fields ending the struct returned by tokenTraitsById, in ABI order.
# Any metadata words before them are keyed by their position.
TOKEN_TRAITS_FIELDS: tuple[str, ...] = (
    "background",
    "mood",
    "torso",
    "faceSlot1",
    "faceSlot2",
    "piercings",
    "eyewearAndGlasses",
    "hairstyleAndHats",
    "item",
)

WORD_SIZE = 32  # bytes per ABI word


class ContractClient:
    """Read-only client for the NPC Customs contract."""

    def __init__(
        self,
        rpc_url: str,
        contract_address: str,
        timeout: float = 10,
        max_retries: int = 3,
    ):
        self.rpc_url = rpc_url
        self.contract_address = contract_address
        self.timeout = timeout
        self.max_retries = max_retries

    def token_traits_by_id(self, token_id) -> dict[str, int]:
        """
        Read the trait record of a token.

        Args:
            token_id: Token identifier (int or decimal string)

        Returns:
            Field name -> value, in ABI order (leading words keyed by position)
        """
        call_data = TOKEN_TRAITS_SELECTOR + _encode_uint256(token_id)
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "eth_call",
            "params": [{"to": self.contract_address, "data": call_data}, "latest"],
        }

        data = self._post_with_retry(payload)
        if data.get("error"):
            raise UpstreamLookupError(f"eth_call failed for token {token_id}: {data['error']}")
        if "result" not in data:
            raise UpstreamLookupError(f"eth_call returned no result for token {token_id}")

        return decode_uint_struct(data["result"], TOKEN_TRAITS_FIELDS)

    def _post_with_retry(self, payload: dict) -> dict:
        """POST the JSON-RPC payload, with exponential backoff on 429 errors."""
        for attempt in range(self.max_retries):
            try:
                response = requests.post(self.rpc_url, json=payload, timeout=self.timeout)
            except requests.RequestException as e:
                raise UpstreamLookupError(f"RPC request to {self.rpc_url} failed: {e}")

            if response.status_code == 429 and attempt < self.max_retries - 1:
                wait_time = 2 ** attempt
                logger.warning(f"RPC rate limited (attempt {attempt + 1}/{self.max_retries}), retrying in {wait_time}s")
                time.sleep(wait_time)
                continue

            try:
                response.raise_for_status()
                return response.json()
            except requests.RequestException as e:
                raise UpstreamLookupError(f"RPC request to {self.rpc_url} failed: {e}")
            except ValueError as e:
                raise UpstreamLookupError(f"RPC response is not JSON: {e}")

        raise UpstreamLookupError("RPC request was never attempted")


def _encode_uint256(value) -> str:
    """ABI-encode a token id as one 32-byte word (hex, no prefix)."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise UpstreamLookupError(f"Invalid token id: {value!r}")
    if number < 0 or number >= 2 ** 256:
        raise UpstreamLookupError(f"Invalid token id: {value!r}")
    return f"{number:064x}"


def decode_uint_struct(result: str, fields: tuple[str, ...]) -> dict[str, int]:
    """
    Decode a static struct of uint fields returned by eth_call.

    The named fields are the trailing words of the struct. Any words before
    them are kept under their position ("0", "1", ...).
    """
    if not isinstance(result, str):
        raise DataFormatError(f"eth_call result is not a hex string: {result!r}")
    hex_data = result[2:] if result.startswith("0x") else result
    try:
        raw = bytes.fromhex(hex_data)
    except ValueError:
        raise DataFormatError(f"eth_call result is not hex: {result[:20]!r}")

    if len(raw) % WORD_SIZE:
        raise DataFormatError(f"eth_call result is {len(raw)} bytes, not whole {WORD_SIZE}-byte words")
    words = [
        int.from_bytes(raw[i:i + WORD_SIZE], "big")
        for i in range(0, len(raw), WORD_SIZE)
    ]
    if len(words) < len(fields):
        raise DataFormatError(f"eth_call result has {len(words)} words, expected at least {len(fields)}")

    extra = len(words) - len(fields)
    record = {str(i): words[i] for i in range(extra)}
    record.update(zip(fields, words[extra:]))
    return record
