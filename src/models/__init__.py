from .course import Course
from .enrol_instance import EnrolInstance, ENROL_INSTANCE_ENABLED, ENROL_INSTANCE_DISABLED
from .user_enrolment import UserEnrolment, USER_ENROLMENT_ACTIVE, USER_ENROLMENT_SUSPENDED
from .staged_file import StagedFile

__all__ = [
    'Course',
    'EnrolInstance',
    'UserEnrolment',
    'StagedFile',
    'ENROL_INSTANCE_ENABLED',
    'ENROL_INSTANCE_DISABLED',
    'USER_ENROLMENT_ACTIVE',
    'USER_ENROLMENT_SUSPENDED',
]
