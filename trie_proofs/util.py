import rlp
from rlp.sedes import Binary, CountableList
from .errors import DimensionExceeded


def encode_hex(v: bytes) -> str:
    return '0x' + v.hex()


def decode_hex(v: str) -> bytes:
    if v.startswith('0x'):
        v = v[2:]
    return bytes.fromhex(v)


def rlp_decode_list(data: bytes) -> list:
    return rlp.decode(data, sedes=CountableList(Binary(allow_empty=True)))


def left_pad(v: bytes, max_len: int) -> bytes:
    """Left-pad v with zero bytes to exactly max_len bytes. Never truncates."""
    if len(v) > max_len:
        raise DimensionExceeded(len(v), max_len)
    return bytes(max_len - len(v)) + bytes(v)
