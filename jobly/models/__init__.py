from jobly.models.company import Company
from jobly.models.job import Job

__all__ = [
    "Company",
    "Job",
]
