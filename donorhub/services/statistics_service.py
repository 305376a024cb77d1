"""
Statistics: the two maintained counters and the on-demand dashboard view.

The dashboard aggregates are recomputed from a full scan of donors, hospitals
and blood requests on every call. Only ``activeDonors`` and
``partnerHospitals`` are maintained incrementally.
"""
from datetime import datetime

from flask import current_app

from donorhub import storage
from donorhub.constants import MONTHS, TOP_LOCATIONS, UNKNOWN_LOCATION


def increment_active_donors():
    storage.increment_statistic('active_donors')
    current_app.logger.info('Statistics: activeDonors incremented')


def increment_partner_hospitals():
    storage.increment_statistic('partner_hospitals')
    current_app.logger.info('Statistics: partnerHospitals incremented')


def get_statistics():
    stats = storage.get_statistics()
    if stats is None:
        return {'activeDonors': 0, 'totalBloodUnits': 0, 'partnerHospitals': 0}
    return stats.to_dict()


def _count_by(values):
    # dicts keep first-encounter order, which the output order relies on
    counts = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def donors_by_blood_type(donors):
    counts = _count_by(donor.blood_type for donor in donors)
    return [{'name': name, 'value': value} for name, value in counts.items()]


def donors_by_location(donors, limit=TOP_LOCATIONS):
    """Top ``limit`` locations by donor count; ties keep first-encounter order."""
    counts = _count_by(donor.location or UNKNOWN_LOCATION for donor in donors)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [{'name': name, 'value': value} for name, value in ranked[:limit]]


def monthly_donor_stats(donors, now=None):
    """Registrations per calendar month for the current and the previous year."""
    now = now or datetime.utcnow()
    this_year = [0] * 12
    last_year = [0] * 12
    for donor in donors:
        created = donor.created_at or now
        if created.year == now.year:
            this_year[created.month - 1] += 1
        elif created.year == now.year - 1:
            last_year[created.month - 1] += 1
    return [
        {'month': month, 'thisYear': this_year[i], 'lastYear': last_year[i]}
        for i, month in enumerate(MONTHS)
    ]


def count_status(records, status):
    return sum(1 for record in records if record.status == status)


def build_dashboard_stats(donors, hospitals, blood_requests, now=None):
    return {
        'donorsByBloodType': donors_by_blood_type(donors),
        'donorsByLocation': donors_by_location(donors),
        'totalDonors': len(donors),
        'monthlyDonorStats': monthly_donor_stats(donors, now=now),
        'totalHospitals': count_status(hospitals, 'approved'),
        'totalPending': count_status(hospitals, 'pending') + count_status(blood_requests, 'pending'),
    }


def get_dashboard_stats(now=None):
    return build_dashboard_stats(
        storage.get_all_donors(),
        storage.get_all_hospitals(),
        storage.get_blood_requests(),
        now=now,
    )
