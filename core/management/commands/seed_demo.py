"""
Django management command to seed a demo account with students and grades
"""
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from assignment.models import Assignment
from core.models import User
from grades.models import Grade
from students.models import Student


DEMO_STUDENTS = [
    {
        'name': 'Ann Demo',
        'grades': [78, 82, 85, 88],
        'assignments': ['https://files.example.com/ann/essay.pdf'],
    },
    {
        'name': 'Ben Demo',
        'grades': [65, 70, 62],
        'assignments': [
            'https://files.example.com/ben/lab-1.pdf',
            'https://files.example.com/ben/lab-2.pdf',
        ],
    },
]


class Command(BaseCommand):
    help = 'Seeds a demo user with students, grades and assignments'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            type=str,
            default='demo@example.com',
            help='Email of the demo user (default: demo@example.com)'
        )
        parser.add_argument(
            '--password',
            type=str,
            default='demo1234',
            help='Password of the demo user, also reset when the user exists (default: demo1234)'
        )

    def handle(self, *args, **options):
        email = options['email']

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()
            if user:
                self.stdout.write(f"Found user: {user.email}, resetting password and replacing their students")
                user.set_password(options['password'])
                user.save(update_fields=['password'])
                user.students.all().delete()
            else:
                user = User.objects.create_user(email, password=options['password'], name='Demo User')
                self.stdout.write(self.style.SUCCESS(f"Created user: {user.email}"))

            now = timezone.now()

            for data in DEMO_STUDENTS:
                student = Student.objects.create(user=user, name=data['name'])

                values = data['grades']
                for index, value in enumerate(values):
                    Grade.objects.create(
                        student=student,
                        value=value,
                        date=now - timedelta(weeks=len(values) - index),
                    )

                for url in data['assignments']:
                    Assignment.objects.create(student=student, file_url=url)

                self.stdout.write(
                    f"  Created {student.name}: {len(values)} grades, {len(data['assignments'])} assignments"
                )

        self.stdout.write(self.style.SUCCESS(f"Seeded {len(DEMO_STUDENTS)} students for {user.email}"))
