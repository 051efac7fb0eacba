from .category import ComplaintCategory
from .complaint import Complaint
from .contact_message import ContactMessage
from .employee import Employee
from .encouragement import EmployeeEncouragement
from .event import Event
from .profile import Profile
from .registration import EventRegistration
from .role import UserRole

__all__ = [
    "ComplaintCategory",
    "Complaint",
    "ContactMessage",
    "Employee",
    "EmployeeEncouragement",
    "Event",
    "EventRegistration",
    "Profile",
    "UserRole",
]
