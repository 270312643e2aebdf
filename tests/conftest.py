# File: tests/conftest.py
"""Pytest configuration and fixtures."""

import os

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from enumfield.core.db import Base

# Import all models
from enumfield.models.user import User  # noqa: F401

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """Create fresh DB session for each test."""
    engine_options = {"echo": False}
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared connection so the in-memory database survives between checkouts
        engine_options["poolclass"] = StaticPool
    engine = create_async_engine(TEST_DATABASE_URL, **engine_options)
    async_session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Provide session
    async with async_session_maker() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
