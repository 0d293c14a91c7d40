from setuptools import setup, find_packages

with open("README.md", "rt", encoding="utf8") as f:
    readme = f.read()

setup(
    name="trie-proofs",
    description="Ethereum trie proof fetcher and preprocessor for noir-trie-proofs circuits",
    version="0.0.1",
    long_description=readme,
    long_description_content_type="text/markdown",
    python_requires=">=3.8, <4",
    license="MIT",
    packages=find_packages(exclude=["tests"]),
    tests_require=[],
    extras_require={
        "testing": ["pytest"],
        "linting": ["flake8", "mypy"],
    },
    install_requires=[
        "rlp",
        "Click",
        "web3>=6",
        "toml",
    ],
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'trie-proofs = trie_proofs._cli:cli',
        ],
    },
    keywords=["ethereum", "merkle-patricia-trie", "eth_getProof", "noir", "zk"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Operating System :: OS Independent",
    ],
)
