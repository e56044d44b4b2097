from setuptools import setup, find_packages

setup(
    name="relay_resolver",
    version="0.1.0",
    packages=find_packages(include=["relay_resolver", "relay_resolver.*"]),
    install_requires=[
        "fastapi==0.109.2",
        "uvicorn==0.27.1",
        "sqlalchemy[asyncio]==2.0.27",
        "asyncpg==0.29.0",
        "python-dotenv==1.0.1",
        "pydantic==2.6.1",
        "pydantic-settings==2.1.0",
        "strawberry-graphql>=0.220.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
)
