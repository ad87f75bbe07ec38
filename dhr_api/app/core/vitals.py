#
# DHR API is the backend of a digital health-record service for doctors,
# patients and registered workers.
#
# Copyright (c) 2025 The DHR API Authors.
#
# This file is part of DHR API.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.
#
"""
Derived values over vital-sign records: trend summaries and body-mass index.

Records are plain mappings as they come back from the vitals table. Nothing in
here touches the database; callers fetch, pass the rows in and persist the
result themselves.
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Mapping, Optional


class NoVitalsData(LookupError):
    """Raised when a trend summary is requested over zero records."""


def _as_float(value: Any) -> Optional[float]:
    # numeric columns can come back as Decimal or str depending on the driver
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _as_int(value: Any) -> Optional[int]:
    result = _as_float(value)
    return None if result is None else _round_half_up(result)


def _fixed_one_decimal(value: float) -> str:
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def derive_bmi(weight: Any = None, height: Any = None, supplied_bmi: Any = None) -> Optional[float]:
    """
    Body-mass index from weight in kg and height in cm, to one decimal place.

    A caller supplied BMI always wins. Missing or unparseable inputs give None
    rather than an error.
    """
    if supplied_bmi is not None:
        return supplied_bmi

    weight_kg = _as_float(weight)
    height_cm = _as_float(height)
    if weight_kg is None or height_cm is None or height_cm <= 0:
        return None

    height_m = height_cm / 100
    scaled = weight_kg / (height_m * height_m) * 10
    # round half away from zero
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 10


def bmi_for_update(current: Mapping[str, Any], updates: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Fold a recomputed BMI into an update payload.

    Only payloads that set weight or height trigger recomputation, and the
    calculation runs over the merged record: the new value where the update
    supplies one, the stored value otherwise.
    """
    fields = dict(updates)
    if "weight" not in updates and "height" not in updates:
        return fields

    weight = updates["weight"] if "weight" in updates else current.get("weight")
    height = updates["height"] if "height" in updates else current.get("height")

    bmi = derive_bmi(weight, height)
    if bmi is not None:
        fields["bmi"] = bmi
    return fields


def _empty_trends() -> Dict[str, Dict[str, Any]]:
    return {
        "blood_pressure": {"avg_systolic": 0, "avg_diastolic": 0, "readings": []},
        "temperature": {"avg": 0, "readings": []},
        "weight": {"avg": 0, "readings": []},
        "heart_rate": {"avg": 0, "readings": []},
        "oxygen_saturation": {"avg": 0, "readings": []},
    }


def compute_trends(records: Iterable[Mapping[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Summarise a patient's recent vitals.

    The records are taken in the order given (the store hands them over newest
    first) and each metric is averaged only over the records that carry it.
    Raises NoVitalsData when there is nothing to summarise.
    """
    records = list(records)
    if not records:
        raise NoVitalsData("No vitals data found")

    trends = _empty_trends()
    sums = {"systolic": 0, "diastolic": 0, "temperature": 0.0, "weight": 0.0,
            "heart_rate": 0, "oxygen_saturation": 0}
    counts = {"blood_pressure": 0, "temperature": 0, "weight": 0, "heart_rate": 0, "oxygen_saturation": 0}

    for record in records:
        date = record.get("recorded_at")

        systolic = _as_int(record.get("blood_pressure_systolic"))
        diastolic = _as_int(record.get("blood_pressure_diastolic"))
        if systolic is not None and diastolic is not None:
            sums["systolic"] += systolic
            sums["diastolic"] += diastolic
            trends["blood_pressure"]["readings"].append(
                {"date": date, "systolic": systolic, "diastolic": diastolic})
            counts["blood_pressure"] += 1

        for metric, parse in (("temperature", _as_float), ("weight", _as_float),
                              ("heart_rate", _as_int), ("oxygen_saturation", _as_int)):
            value = parse(record.get(metric))
            if value is None:
                continue
            sums[metric] += value
            trends[metric]["readings"].append({"date": date, "value": value})
            counts[metric] += 1

    if counts["blood_pressure"]:
        trends["blood_pressure"]["avg_systolic"] = _round_half_up(sums["systolic"] / counts["blood_pressure"])
        trends["blood_pressure"]["avg_diastolic"] = _round_half_up(sums["diastolic"] / counts["blood_pressure"])
    for metric in ("temperature", "weight"):
        if counts[metric]:
            trends[metric]["avg"] = _fixed_one_decimal(sums[metric] / counts[metric])
    for metric in ("heart_rate", "oxygen_saturation"):
        if counts[metric]:
            trends[metric]["avg"] = _round_half_up(sums[metric] / counts[metric])

    return trends
