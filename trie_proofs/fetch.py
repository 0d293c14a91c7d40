from typing import Tuple, Union
from .external import ProofSource
from .errors import FetchError
from .params import MAX_TRIE_NODE_LENGTH, MAX_ACCOUNT_STATE_LENGTH, MAX_STORAGE_VALUE_LENGTH
from .proof import TrieProof, extract_value, preprocess_proof
from .util import encode_hex, left_pad


def storage_value_bytes(v: Union[int, bytes]) -> bytes:
    """Storage slot value as a 32 byte big-endian integer.
    Nodes (and web3 versions) disagree on whether it is returned as number or as bytes."""
    if isinstance(v, int):
        raw = v.to_bytes(length=(v.bit_length() + 7) // 8, byteorder='big')
    else:
        raw = bytes(v).lstrip(b'\x00')
    return left_pad(raw, MAX_STORAGE_VALUE_LENGTH)


def fetch_state_proof(src: ProofSource, block_number: int, address: bytes,
                      max_depth: int) -> Tuple[bytes, TrieProof]:
    """Fetches and preprocesses the state proof of an account.
    Returns the state root of the block, and the preprocessed proof"""
    res = src.get_proof(address, [], block_number)
    state_proof = [bytes(node) for node in res['accountProof']]

    # the account proof is relative to the state root, which is only in the block header
    state_root = src.state_root(block_number)

    value = extract_value(state_proof)

    preproc_proof = preprocess_proof(
        state_proof,
        key=bytes(address),
        value=value,
        max_depth=max_depth,
        max_node_len=MAX_TRIE_NODE_LENGTH,
        max_value_len=MAX_ACCOUNT_STATE_LENGTH,
    )
    return state_root, preproc_proof


def fetch_storage_proof(src: ProofSource, block_number: int, key: bytes, address: bytes,
                        max_depth: int) -> Tuple[bytes, TrieProof]:
    """Fetches and preprocesses the proof of a storage slot of an account.
    Returns the storage root of the account, and the preprocessed proof"""
    res = src.get_proof(address, [key], block_number)
    if len(res['storageProof']) == 0:
        raise FetchError("no storage proof returned for key %s" % encode_hex(key))
    storage_proof = res['storageProof'][0]

    storage_root = bytes(res['storageHash'])

    # the value is returned directly, no need to extract it from the terminal node
    value = storage_value_bytes(storage_proof['value'])

    preproc_proof = preprocess_proof(
        [bytes(node) for node in storage_proof['proof']],
        key=bytes(key),
        value=value,
        max_depth=max_depth,
        max_node_len=MAX_TRIE_NODE_LENGTH,
        max_value_len=MAX_STORAGE_VALUE_LENGTH,
    )
    return storage_root, preproc_proof
