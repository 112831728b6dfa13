# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa",
    version="0.1.0",
    description="A minimal Lisp reader and evaluator with a REPL and language server",
    packages=find_packages(include=["kappa", "kappa.*", "kappa_lsp", "kappa_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "kappa=kappa.repl:main",
            "kappa-ls=kappa_lsp.server:main",
            "kappa-repl-server=kappa_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
