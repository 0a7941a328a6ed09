# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mola",
    version="0.1.0",
    description="A small Lisp core: tokenizer, reader, evaluator and printer",
    packages=find_namespace_packages(include=["mola", "mola.*", "mola_lsp", "mola_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": [
            "mola=mola.repl:main",
            "mola-ls=mola_lsp.server:main",
        ],
    },
    zip_safe=False,
)
