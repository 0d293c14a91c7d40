from .errors import TrieProofError, DimensionExceeded, DepthExceeded, NodeLengthExceeded, MalformedProof, \
    EmptyProof, FetchError
from .proof import TrieProof, extract_value, preprocess_proof, render_toml
from .util import left_pad
from .fetch import fetch_state_proof, fetch_storage_proof
