"""Applications - recording right swipes and recruiter decisions."""
from core.applications.recorder import ApplicationRecorder
from core.applications.service import ApplicationService

__all__ = ['ApplicationRecorder', 'ApplicationService']
