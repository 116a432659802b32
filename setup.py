from setuptools import find_packages, setup

setup(
    name="luxtronik_stats",
    version="0.1.0",
    description="A tool to collect Alpha-Innotec / Luxtronik heat pump calculations into InfluxDB",
    author="Your Name",
    author_email="your.email@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-dotenv>=1.0.0",
        "influxdb-client[async]>=1.36.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "luxtronik-stats=luxtronik_stats.cli:main",
        ],
    },
    python_requires=">=3.10",
)
