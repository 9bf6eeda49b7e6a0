"""Preset Australian locations offered for quick selection."""

from uvsafe.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(city="Sydney", state="NSW", slug="sydney", lat=-33.8688, lon=151.2093),
    LocationConfig(city="Melbourne", state="VIC", slug="melbourne", lat=-37.8136, lon=144.9631),
    LocationConfig(city="Brisbane", state="QLD", slug="brisbane", lat=-27.4698, lon=153.0251),
    LocationConfig(city="Perth", state="WA", slug="perth", lat=-31.9523, lon=115.8613),
    LocationConfig(city="Adelaide", state="SA", slug="adelaide", lat=-34.9285, lon=138.6007),
    LocationConfig(city="Gold Coast", state="QLD", slug="gold-coast", lat=-28.0167, lon=153.4000),
    LocationConfig(city="Canberra", state="ACT", slug="canberra", lat=-35.2809, lon=149.1300),
    LocationConfig(city="Newcastle", state="NSW", slug="newcastle", lat=-32.9283, lon=151.7817),
]
