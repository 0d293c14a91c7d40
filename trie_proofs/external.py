from typing import Any, List, Mapping, Protocol
from web3 import Web3
from web3.exceptions import BlockNotFound
from .errors import FetchError


class ProofSource(Protocol):
    def block_number(self) -> int:
        raise NotImplementedError

    # eth_getProof response: accountProof, storageHash, storageProof (key, value, proof)
    def get_proof(self, address: bytes, keys: List[bytes], block_number: int) -> Mapping[str, Any]:
        raise NotImplementedError

    def state_root(self, block_number: int) -> bytes:
        raise NotImplementedError


class Web3Source(ProofSource):
    """Proof source backed by the JSON-RPC API of an Ethereum node"""

    rpc_url: str
    w3: Web3

    def __init__(self, rpc_url: str):
        self.rpc_url = rpc_url
        self.w3 = Web3(Web3.HTTPProvider(rpc_url))

    def block_number(self) -> int:
        return self.w3.eth.block_number

    def get_proof(self, address: bytes, keys: List[bytes], block_number: int) -> Mapping[str, Any]:
        positions = [int.from_bytes(k, byteorder='big') for k in keys]
        return self.w3.eth.get_proof(Web3.to_checksum_address(address), positions, block_number)

    def state_root(self, block_number: int) -> bytes:
        try:
            block = self.w3.eth.get_block(block_number)
        except BlockNotFound as e:
            raise FetchError("could not fetch block number %d" % block_number) from e
        return bytes(block['stateRoot'])
