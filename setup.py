# setup.py
from setuptools import setup, find_packages

setup(
    name="texted",
    version="0.1.0",
    description="Scriptable headless text editor with shell, S-expression and JSON script syntaxes",
    packages=find_packages(include=["texted", "texted.*", "texted_lsp", "texted_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.0,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "texted-ls=texted_lsp.server:main",
        ],
    },
    zip_safe=False,
)
