# Limits of the fixed-size inputs of the noir-trie-proofs circuits

MAX_TRIE_NODE_LENGTH = 532  # Maximum length of a state or storage trie node in bytes
MAX_STORAGE_VALUE_LENGTH = 32  # Maximum size of the value in a storage slot
MAX_ACCOUNT_STATE_LENGTH = 134  # Maximum size of the RLP-encoded list representing an account state

ADDRESS_LENGTH = 20
STORAGE_KEY_LENGTH = 32

# Default table names in the Toml output
STATE_ROOT_NAME = "state_root"
STATE_PROOF_NAME = "state_proof"
STORAGE_ROOT_NAME = "storage_root"
STORAGE_PROOF_NAME = "storage_proof"
