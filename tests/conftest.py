"""
Shared fixtures: raw payload samples shaped like the live cyclist dataset.
"""

import pytest

from cyclist_scatter.data.dataset import build_dataset
from cyclist_scatter.data.scales import compute_scales


def raw_record(time="36:50", doping="", name="Rider", nationality="ITA", url="", year="1994"):
    return {
        "Time": time,
        "Doping": doping,
        "Name": name,
        "Nationality": nationality,
        "URL": url,
        "Year": year,
    }


@pytest.fixture
def scenario_raw():
    """Two riders sharing year and time; the second has an allegation."""
    return [
        raw_record(time="36:50", doping="", name="A", nationality="X", url="", year="1994"),
        raw_record(time="36:50", doping=" banned ", name="B", nationality="Y", url="u", year="1994"),
    ]


@pytest.fixture
def sample_raw():
    """A short payload with numeric years, like the live API."""
    return [
        {"Time": "36:50", "Place": 1, "Seconds": 2210, "Name": "Marco Pantani", "Year": 1995,
         "Nationality": "ITA", "Doping": "Alleged drug use during 1995 due to high hematocrit levels",
         "URL": "https://en.wikipedia.org/wiki/Marco_Pantani#Alleged_drug_use"},
        {"Time": "36:55", "Place": 2, "Seconds": 2215, "Name": "Marco Pantani", "Year": 1997,
         "Nationality": "ITA", "Doping": "Alleged drug use during 1997 due to high hermatocrit levels",
         "URL": "https://en.wikipedia.org/wiki/Marco_Pantani#Alleged_drug_use"},
        {"Time": "37:15", "Place": 3, "Seconds": 2235, "Name": "Marco Pantani", "Year": 1994,
         "Nationality": "ITA", "Doping": "Alleged drug use during 1994 due to high hermatocrit levels",
         "URL": "https://en.wikipedia.org/wiki/Marco_Pantani#Alleged_drug_use"},
        {"Time": "38:14", "Place": 13, "Seconds": 2294, "Name": "Carlos Sastre", "Year": 2008,
         "Nationality": "ESP", "Doping": "", "URL": ""},
        {"Time": "39:23", "Place": 35, "Seconds": 2363, "Name": "Nairo Quintana", "Year": 2015,
         "Nationality": "COL", "Doping": "", "URL": ""},
    ]


@pytest.fixture
def sample_records(sample_raw):
    return build_dataset(sample_raw)


@pytest.fixture
def sample_scales(sample_records):
    return compute_scales(sample_records, 720, 480)
