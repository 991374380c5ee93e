"""
Transactional email for project review decisions.
"""
import logging
import os
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending transactional emails with consistent templates."""

    @staticmethod
    def get_site_domain() -> str:
        """
        Get the site domain based on DEVELOPMENT_MODE setting.

        Returns:
            str: The full site domain URL (e.g. 'https://hub.example.edu' or 'http://localhost:8000')
        """
        development_mode = getattr(settings, 'DEVELOPMENT_MODE', 'dev').lower()
        if development_mode == 'prod':
            site_domain = os.getenv('SITE_DOMAIN', '') or getattr(settings, 'SITE_DOMAIN', '')
            if site_domain and not site_domain.startswith(('http://', 'https://')):
                site_domain = f'https://{site_domain}'
            return site_domain
        return 'http://localhost:8000'

    @staticmethod
    def send_email(
        subject: str,
        recipient_email: str,
        template_name: str,
        context: Optional[Dict[str, Any]] = None,
        from_email: Optional[str] = None,
        fail_silently: bool = False,
    ) -> bool:
        """
        Send an HTML email rendered from ``templates/emails/<template_name>.html``.

        Returns:
            bool: True if the email was sent, False if sending failed with fail_silently set
        """
        if context is None:
            context = {}
        if from_email is None:
            from_email = settings.DEFAULT_FROM_EMAIL

        context.setdefault('site_domain', EmailService.get_site_domain())
        context.setdefault('site_name', 'UCU Innovators Hub')

        html_content = render_to_string(f'emails/{template_name}.html', context)

        msg = EmailMultiAlternatives(
            subject=subject,
            body='',
            from_email=from_email,
            to=[recipient_email],
        )
        msg.attach_alternative(html_content, "text/html")

        try:
            msg.send(fail_silently=fail_silently)
            return True
        except Exception:
            if not fail_silently:
                raise
            return False

    @staticmethod
    def send_review_decision_email(review) -> bool:
        """Tell the project owner about a supervisor's decision."""
        project = review.project
        student = project.student
        context = {
            'student_name': student.full_name or "there",
            'project': project,
            'review': review,
            'status_label': review.get_status_display(),
            'dashboard_url': f"{EmailService.get_site_domain()}/student/dashboard",
        }
        return EmailService.send_email(
            subject=f'Your project "{project.title}" was reviewed',
            recipient_email=student.user.email,
            template_name='review_decision',
            context=context,
        )


def notify_review_decision(review) -> None:
    """Send the decision email; failures are logged and never raised to the caller."""
    if not getattr(settings, 'REVIEW_EMAILS_ENABLED', True):
        return
    try:
        EmailService.send_review_decision_email(review)
        logger.info("review_email: sent project=%s status=%s", review.project_id, review.status)
    except Exception as e:
        logger.warning("review_email: failed project=%s: %s", review.project_id, e)
