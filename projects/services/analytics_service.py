"""
Counts for the admin analytics dashboard. Everything is tallied in memory over
rows fetched with a single query per table.
"""
from collections import Counter

from accounts.models import Faculty
from projects.models import Project, ProjectTechnology

TOP_TECHNOLOGIES_LIMIT = 8


def percent(part: int, whole: int) -> int:
    """part / whole as a whole percentage, halves rounded up; 0 when whole is 0."""
    if not whole:
        return 0
    return (part * 200 + whole) // (2 * whole)


def approval_rate(approved: int, total: int) -> int:
    return percent(approved, total)


def status_counts(projects) -> dict:
    statuses = [p["status"] for p in projects]
    counts = Counter(statuses)
    total = len(statuses)
    return {
        "total": total,
        "approved": counts.get(Project.Status.APPROVED.value, 0),
        "pending": counts.get(Project.Status.PENDING.value, 0),
        "rejected": counts.get(Project.Status.REJECTED.value, 0),
        "revision": counts.get(Project.Status.REVISION.value, 0),
        "approval_rate": approval_rate(counts.get(Project.Status.APPROVED.value, 0), total),
    }


def faculty_breakdown(projects, faculties) -> list:
    """Total and approved projects per faculty, labelled with the faculty's first word."""
    totals = Counter()
    approved = Counter()
    for p in projects:
        totals[p["faculty_id"]] += 1
        if p["status"] == Project.Status.APPROVED:
            approved[p["faculty_id"]] += 1
    return [
        {
            "name": f.name.split(' ')[0],
            "full_name": f.name,
            "count": totals.get(f.id, 0),
            "approved": approved.get(f.id, 0),
        }
        for f in faculties
    ]


def top_technologies(technology_names, limit=TOP_TECHNOLOGIES_LIMIT) -> list:
    counts = Counter(technology_names)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [{"name": name, "value": value} for name, value in ranked[:limit]]


def build_dashboard() -> dict:
    projects = list(Project.objects.values("status", "faculty_id"))
    faculties = list(Faculty.objects.order_by("name"))
    tags = ProjectTechnology.objects.values_list("technology__name", flat=True)

    stats = status_counts(projects)
    faculty_data = faculty_breakdown(projects, faculties)
    tech_data = top_technologies(tags)

    max_faculty_count = max([row["count"] for row in faculty_data] or [0])
    for row in faculty_data:
        row["bar_percent"] = percent(row["count"], max_faculty_count)
        row["approved_bar_percent"] = percent(row["approved"], max_faculty_count)
        row["other_bar_percent"] = row["bar_percent"] - row["approved_bar_percent"]
    tag_total = sum(row["value"] for row in tech_data)
    for row in tech_data:
        row["share_percent"] = percent(row["value"], tag_total)

    return {
        "stats": stats,
        "faculty_data": faculty_data,
        "tech_data": tech_data,
    }
