import logging
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from app.core.config import settings

logger = logging.getLogger(__name__)

# Create MongoDB client (connects lazily on first operation)
client = MongoClient(
    settings.MONGODB_URL,
    serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    uuidRepresentation="standard",
)


def get_db():
    """
    Dependency function to get the application database.
    Used in FastAPI endpoints with Depends(get_db)
    """
    yield client[settings.MONGO_DB]


def init_db(db: Database) -> None:
    """
    Initialize database indexes.

    Every finder in app.crud is an equality match on a single field, and
    each such field gets its own index here:
    - job_applications.jobId: non-unique, many applications per job
    - recruiters.email: unique, email is the recruiter lookup key
    """
    from app.models import JobApplication, Recruiter

    db[JobApplication.collection_name].create_index([("jobId", ASCENDING)], name="jobId_1")
    db[Recruiter.collection_name].create_index([("email", ASCENDING)], name="email_1", unique=True)
    logger.info("MongoDB indexes ensured")
