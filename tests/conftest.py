import io
from datetime import date

import pytest
from PIL import Image

from destiny_calculator import BirthData, DestinyCalculator


def make_image(color=(200, 150, 120), size=(64, 48), fmt="PNG") -> bytes:
    img = Image.new("RGB", size, color=color)
    for x in range(0, size[0], 4):
        img.putpixel((x, x % size[1]), (10, 20, 30))
    output = io.BytesIO()
    img.save(output, format=fmt)
    return output.getvalue()


@pytest.fixture
def image_factory():
    return make_image


@pytest.fixture
def palm_image() -> bytes:
    return make_image()


@pytest.fixture
def reading():
    data = BirthData(birth_date=date(1990, 5, 7), birth_time="14:30", birth_location="Delhi", name="Asha")
    return DestinyCalculator().calculate_reading(data)


@pytest.fixture
def master_reading():
    return DestinyCalculator().calculate_reading(BirthData(birth_date=date(2009, 2, 9)))
