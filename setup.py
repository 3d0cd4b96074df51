# setup.py
from setuptools import setup, find_packages

setup(
    name="adstxt-crawler",
    version="1.0.2",
    description="Асинхронный краулер ads.txt для больших списков доменов",
    packages=find_packages(exclude=["tests", "tests.*"]),  # найдёт adstxt_crawler и подпакеты
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "adstxt-crawler=adstxt_crawler.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
