import re
from pathlib import Path

from setuptools import find_packages, setup

_about = Path(__file__).parent / "src" / "ixforge" / "__about__.py"
_version = re.search(r'__version__ = "([^"]+)"', _about.read_text()).group(1)

if __name__ == "__main__":
    setup(
        name="ixforge",
        version=_version,
        description="Solana-style instruction builder and Ed25519 message signing service",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.10",
        install_requires=[
            "base58>=2.1",
            "fastapi>=0.110",
            "pydantic>=2.5",
            "python-dotenv>=1.0",
            "uvicorn>=0.27",
        ],
        extras_require={
            "test": ["pytest>=7", "httpx>=0.25"],
        },
        entry_points={
            "console_scripts": ["ixforge=ixforge.__main__:main"],
        },
    )
