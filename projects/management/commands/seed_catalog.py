"""
Create the default faculties, categories and technologies.

Usage:
    python manage.py seed_catalog
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from accounts.models import Faculty
from projects.models import Category, Technology

DEFAULT_FACULTIES = [
    'Faculty of Engineering, Design and Technology',
    'Faculty of Business and Administration',
    'Faculty of Health Sciences',
    'Faculty of Law',
    'Faculty of Education and Arts',
    'School of Social Sciences',
]

DEFAULT_CATEGORIES = [
    'Web Application',
    'Mobile Application',
    'Artificial Intelligence',
    'Internet of Things',
    'Data Science',
    'Cybersecurity',
    'Game Development',
    'Research',
]

DEFAULT_TECHNOLOGIES = [
    'Python', 'Django', 'JavaScript', 'TypeScript', 'React', 'Node.js',
    'Java', 'Kotlin', 'Flutter', 'PHP', 'Laravel', 'PostgreSQL',
    'MySQL', 'MongoDB', 'TensorFlow', 'Arduino', 'Docker', 'C++',
]


class Command(BaseCommand):
    help = 'Create default faculties, categories and technologies (existing rows are kept).'

    def handle(self, *args, **options):
        with transaction.atomic():
            created = {
                'faculties': self._seed(Faculty, DEFAULT_FACULTIES),
                'categories': self._seed(Category, DEFAULT_CATEGORIES),
                'technologies': self._seed(Technology, DEFAULT_TECHNOLOGIES),
            }
        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog seeded: {created['faculties']} faculties, "
                f"{created['categories']} categories, "
                f"{created['technologies']} technologies created"
            )
        )

    def _seed(self, model, names):
        created_count = 0
        for name in names:
            _, created = model.objects.get_or_create(name=name)
            if created:
                created_count += 1
        return created_count
