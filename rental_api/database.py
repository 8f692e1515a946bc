# rental_api/database.py
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import DESCENDING
from rental_api.config import Settings, get_settings
from rental_api.logger import get_logger

logger = get_logger("database")

VEHICLES = "vehicles"
RESERVATIONS = "reservations"


class Database:
    """Holds the single MongoDB client for the process.

    The handle is created by the application lifespan and handed to the
    repositories through the ``get_database`` dependency.
    """

    def __init__(self):
        self.client: AsyncIOMotorClient = None
        self.db: AsyncIOMotorDatabase = None

    async def connect(self, settings: Settings):
        self.client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            socketTimeoutMS=settings.MONGODB_SOCKET_TIMEOUT_MS,
            tz_aware=True,
        )
        self.db = self.client[settings.MONGODB_DB_NAME]
        # motor connects lazily, ping so an unreachable server fails startup
        await self.client.admin.command("ping")
        logger.info(f"Connected to MongoDB: {settings.MONGODB_DB_NAME}")

    async def close(self):
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Closed MongoDB connection")


db = Database()


async def connect_to_mongo():
    await db.connect(get_settings())


async def close_mongo_connection():
    await db.close()


async def get_database() -> AsyncIOMotorDatabase:
    return db.db


async def init_db(database: AsyncIOMotorDatabase) -> bool:
    try:
        collections = await database.list_collection_names()
        for name in (VEHICLES, RESERVATIONS):
            if name not in collections:
                await database.create_collection(name)

        # list() sorts newest first
        await database[VEHICLES].create_index([("createdAt", DESCENDING)])
        await database[RESERVATIONS].create_index([("createdAt", DESCENDING)])

        logger.info("Database initialized successfully!")
        return True
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        return False
