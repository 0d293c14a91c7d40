from typing import Dict, List, NamedTuple, Sequence
import toml
from rlp.exceptions import RLPException
from .errors import DepthExceeded, EmptyProof, MalformedProof, NodeLengthExceeded, DimensionExceeded
from .util import left_pad, rlp_decode_list


def hex_bytes(v: bytes) -> List[str]:
    return ["0x%02x" % b for b in v]


# Mirrors the TrieProof struct of the noir-trie-proofs library.
class TrieProof(NamedTuple):
    # unhashed key
    key: bytes
    # flat proof: max_depth slots of max_node_len bytes each, RLP nodes left-justified, zero padded
    proof: bytes
    # actual proof depth, the padding slots are not counted
    depth: int
    # value resolved by the proof, left-padded
    value: bytes

    def to_toml_dict(self) -> Dict[str, object]:
        return {
            "key": hex_bytes(self.key),
            "proof": hex_bytes(self.proof),
            "depth": "0x%02x" % self.depth,
            "value": hex_bytes(self.value),
        }

    def to_toml_string(self, proof_name: str) -> str:
        """Toml table with the entries of this proof, named proof_name"""
        return toml.dumps({proof_name: self.to_toml_dict()})


def render_toml(root: bytes, proof: TrieProof, root_name: str, proof_name: str) -> str:
    """Toml document with the trie root as top-level byte array, followed by the proof table"""
    return toml.dumps({
        root_name: hex_bytes(root),
        proof_name: proof.to_toml_dict(),
    })


def extract_value(proof: Sequence[bytes]) -> bytes:
    """Returns the last item of the RLP list in the terminal node of the proof.

    For a state proof this is the value the account key resolves to.
    Storage proofs do not need this: eth_getProof returns their value directly.
    """
    if len(proof) == 0:
        raise EmptyProof()
    terminal = bytes(proof[-1])
    try:
        items = rlp_decode_list(terminal)
    except RLPException as e:
        raise MalformedProof("terminal node is not an RLP list of byte strings: %s" % e) from e
    if len(items) == 0:
        raise MalformedProof("terminal node is an empty RLP list")
    return items[-1]


def preprocess_proof(proof: Sequence[bytes], key: bytes, value: bytes,
                     max_depth: int, max_node_len: int, max_value_len: int) -> TrieProof:
    """Pads and flattens a trie proof into the fixed dimensions of a noir-trie-proofs circuit.

    Every node is right-padded with zeroes to max_node_len, and the node list is extended
    with empty nodes up to max_depth, then flattened into max_depth * max_node_len bytes.
    The value is left-padded to max_value_len.
    Raises DepthExceeded, NodeLengthExceeded or DimensionExceeded if the limits are too small.
    """
    depth = len(proof)
    if depth > max_depth:
        raise DepthExceeded(depth, max_depth)

    if len(key) > max_value_len:
        raise DimensionExceeded(len(key), max_value_len)

    # all zeroes, so unused slots and the tails of short nodes are already padded
    flat = bytearray(max_depth * max_node_len)
    for i, node in enumerate(proof):
        if len(node) > max_node_len:
            raise NodeLengthExceeded(i, len(node), max_node_len)
        offset = i * max_node_len
        flat[offset:offset + len(node)] = node

    padded_value = left_pad(value, max_value_len)

    return TrieProof(
        key=bytes(key),
        proof=bytes(flat),
        depth=depth,
        value=padded_value,
    )
