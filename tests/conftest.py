from typing import Any, Dict, List, Mapping
import pytest
import rlp
from trie_proofs.errors import FetchError

ADDRESS = bytes.fromhex("b47e3cd837ddf8e4c57f05d70ab865de6e193bbb")
SLOT = bytes(31) + b'\x02'
STATE_ROOT = b'\x5e' * 32
STORAGE_ROOT = b'\x57' * 32

ACCOUNT = rlp.encode([7, 10 ** 18, STORAGE_ROOT, b'\xc0' * 32])
ACCOUNT_PROOF = [
    rlp.encode([b'\x11' * 32] * 16 + [b'']),
    rlp.encode([b'\x22' * 32] * 16 + [b'']),
    rlp.encode([b'\x3f' + b'\x33' * 30, ACCOUNT]),
]
STORAGE_PROOF = [
    rlp.encode([b'\x44' * 32] * 16 + [b'']),
    rlp.encode([b'\x20' + b'\x55' * 31, rlp.encode(b'\x01\x02\x03')]),
]


class FakeSource(object):
    """Serves eth_getProof responses shaped like web3 results, for a single account"""

    def __init__(self, latest: int = 100, storage_value: Any = 0x010203):
        self.latest = latest
        self.storage_value = storage_value
        self.calls: List[tuple] = []

    def block_number(self) -> int:
        return self.latest

    def get_proof(self, address: bytes, keys: List[bytes], block_number: int) -> Mapping[str, Any]:
        self.calls.append(("get_proof", address, keys, block_number))
        res: Dict[str, Any] = {
            'address': address,
            'accountProof': list(ACCOUNT_PROOF),
            'storageHash': STORAGE_ROOT,
            'storageProof': [],
        }
        for k in keys:
            res['storageProof'].append({'key': k, 'value': self.storage_value, 'proof': list(STORAGE_PROOF)})
        return res

    def state_root(self, block_number: int) -> bytes:
        self.calls.append(("state_root", block_number))
        if block_number > self.latest:
            raise FetchError("could not fetch block number %d" % block_number)
        return STATE_ROOT


@pytest.fixture
def fake_source():
    return FakeSource()
