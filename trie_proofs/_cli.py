import click
from typing import Callable, Optional, Tuple
from .errors import TrieProofError
from .external import ProofSource, Web3Source
from .fetch import fetch_state_proof, fetch_storage_proof
from .params import ADDRESS_LENGTH, STORAGE_KEY_LENGTH, STATE_ROOT_NAME, STATE_PROOF_NAME, \
    STORAGE_ROOT_NAME, STORAGE_PROOF_NAME
from .proof import TrieProof, render_toml
from .util import decode_hex, left_pad


class HexBytes(click.ParamType):
    """Hex encoded bytes, 0x prefix optional.
    Exactly `length` bytes, or at most `length` bytes left-padded if `pad` is set."""
    name = "hex"

    def __init__(self, length: int, pad: bool = False):
        self.length = length
        self.pad = pad

    def convert(self, value, param, ctx):
        if isinstance(value, bytes):
            return value
        if value.startswith('0x'):
            value = value[2:]
        # quantities like 0x0 are fine for keys that get padded anyway
        if self.pad and len(value) % 2 == 1:
            value = '0' + value
        try:
            out = decode_hex(value)
        except ValueError:
            self.fail("%r is not valid hex" % value, param, ctx)
        if self.pad and len(out) <= self.length:
            return left_pad(out, self.length)
        if len(out) != self.length:
            self.fail("expected %d bytes, got %d" % (self.length, len(out)), param, ctx)
        return out


class Options(object):
    rpc_url: Optional[str]
    max_depth: Optional[int]
    block_number: Optional[int]
    root_name: Optional[str]
    proof_name: Optional[str]

    def __init__(self, rpc_url, max_depth, block_number, root_name, proof_name):
        self.rpc_url = rpc_url
        self.max_depth = max_depth
        self.block_number = block_number
        self.root_name = root_name
        self.proof_name = proof_name


# Replaced in tests, to avoid a real node
make_source: Callable[[str], ProofSource] = Web3Source


@click.group()
@click.option('-r', '--rpc-url', envvar='RPC_URL', type=click.STRING,
              help='URL of JSON-RPC supporting Ethereum node')
@click.option('-m', '--max-depth', type=click.IntRange(min=0), help='Maximum allowable depth of proof')
@click.option('-b', '--block-number', type=click.IntRange(min=0),
              help='Block number. If left unspecified, the latest block number is used.')
@click.option('--root-name', type=click.STRING, help='Optional name of trie root in Toml output.')
@click.option('--proof-name', type=click.STRING, help='Optional name of trie proof in Toml output.')
@click.pass_context
def cli(ctx, rpc_url: Optional[str], max_depth: Optional[int], block_number: Optional[int],
        root_name: Optional[str], proof_name: Optional[str]):
    """Fetch Ethereum trie proofs, preprocessed for noir-trie-proofs circuits"""
    ctx.obj = Options(rpc_url, max_depth, block_number, root_name, proof_name)


def run(opts: Options, fetch: Callable[[ProofSource, int, int], Tuple[bytes, TrieProof]],
        root_name: str, proof_name: str):
    # max depth and RPC URL *must* be specified, but not for --help of subcommands
    if opts.max_depth is None:
        raise click.UsageError("--max-depth must be specified!")
    if opts.rpc_url is None:
        raise click.UsageError("--rpc-url must be specified!")

    src = make_source(opts.rpc_url)

    block_number = opts.block_number
    if block_number is None:
        block_number = src.block_number()
    click.echo("fetching proof at block %d..." % block_number, err=True)

    try:
        root, proof = fetch(src, block_number, opts.max_depth)
    except TrieProofError as e:
        raise click.ClickException(str(e)) from e

    click.echo("proof depth: %d" % proof.depth, err=True)
    click.echo(render_toml(root, proof, opts.root_name or root_name, opts.proof_name or proof_name))


@cli.command()
@click.option('-a', '--address', type=HexBytes(ADDRESS_LENGTH), required=True,
              help='Address of the account from which a storage proof is retrieved')
@click.option('-k', '--key', type=HexBytes(STORAGE_KEY_LENGTH, pad=True), required=True,
              help='Key of the storage slot for which a storage proof is retrieved')
@click.pass_obj
def storage_proof(opts: Options, address: bytes, key: bytes):
    """Fetch storage proof"""
    run(opts, lambda src, n, max_depth: fetch_storage_proof(src, n, key, address, max_depth),
        STORAGE_ROOT_NAME, STORAGE_PROOF_NAME)


@cli.command()
@click.option('-a', '--address', type=HexBytes(ADDRESS_LENGTH), required=True,
              help='Address of the account whose state proof is retrieved')
@click.pass_obj
def state_proof(opts: Options, address: bytes):
    """Fetch state proof"""
    run(opts, lambda src, n, max_depth: fetch_state_proof(src, n, address, max_depth),
        STATE_ROOT_NAME, STATE_PROOF_NAME)
