"""Shared fixtures: headless matplotlib and small troponin CSV files."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

HEADER = "Age,Sex,SBP,DBP,B_hsTNT,F_hsTnT,ACmortality,MACE,Coronary,Stroke"

ROWS = [
    "40-49,1,120,80,5.2,6.1,0,0,0,0",
    "50-59,2,135,85,7.8,7.0,0,1,0,0",
    "60-69,1,142,90,12.4,15.9,0,0,1,0",
    "70-79,2,150,88,18.0,21.5,1,1,0,0",
    "80-89,1,160,70,25.3,30.2,1,1,1,0",
    "90-,2,128,76,40.1,38.7,1,0,0,1",
    "40-49,1,118,78,3.9,4.4,0,0,0,0",
    "60-69,2,138,84,9.6,11.2,0,0,0,0",
    "70-79,1,146,92,14.7,13.8,0,1,1,0",
    "80-89,2,155,74,22.2,27.4,1,0,0,1",
]


def write_csv(path, rows, header: str = HEADER):
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def troponin_csv(tmp_path):
    return write_csv(tmp_path / "troponin.csv", ROWS)
