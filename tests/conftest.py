from __future__ import annotations

import io
from datetime import datetime

import pytest
from PIL import Image

from src.gym_attendance.gym_attendance.members.model import Member


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0)


@pytest.fixture
def member() -> Member:
    return Member(member_id=7, full_name="Lucía Pérez", person_id="0b0d3c2e-6f55-4c9b-9f61-0e3f3b7a1a11")


@pytest.fixture
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (16, 16), color=(200, 180, 160)).save(buf, format="PNG")
    return buf.getvalue()
