from setuptools import setup, find_namespace_packages

setup(
    name="nuggetbook",
    version="0.1.0",
    packages=find_namespace_packages(include=['nuggetbook*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "requests",
        "fastapi",
        "pydantic>=2",
        "Werkzeug",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
        "server": [
            "uvicorn",
        ],
    },
    entry_points={
        "console_scripts": [
            "nuggetbook=nuggetbook.cli.main:main",
        ],
    },
)
