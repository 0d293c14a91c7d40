class TrieProofError(Exception):
    """Base of all errors raised while fetching or preprocessing a trie proof"""


class DimensionExceeded(TrieProofError):
    actual: int
    max: int

    def __init__(self, actual: int, max: int):
        super().__init__("the vector (%d bytes) exceeds its maximum expected dimensions (%d bytes)" % (actual, max))
        self.actual = actual
        self.max = max


class DepthExceeded(TrieProofError):
    actual: int
    max: int

    def __init__(self, actual: int, max: int):
        super().__init__("the depth of this proof (%d) exceeds the maximum depth specified (%d)" % (actual, max))
        self.actual = actual
        self.max = max


class NodeLengthExceeded(TrieProofError):
    index: int
    actual: int
    max: int

    def __init__(self, index: int, actual: int, max: int):
        super().__init__("proof node %d has length %d, exceeding the maximum node length (%d)" % (index, actual, max))
        self.index = index
        self.actual = actual
        self.max = max


class MalformedProof(TrieProofError):
    reason: str

    def __init__(self, reason: str):
        super().__init__("malformed proof: " + reason)
        self.reason = reason


class EmptyProof(TrieProofError):
    def __init__(self):
        super().__init__("proof is empty, no terminal node to resolve the value from")


# Not a preprocessing failure: the node did not return what was asked for.
class FetchError(TrieProofError):
    reason: str

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
