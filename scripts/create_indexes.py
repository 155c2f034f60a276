from pymongo import MongoClient, ASCENDING
from social_api.core.config import settings
from social_api.services.repositories.users_repo import (
    USER_ID_INDEX, USERNAME_INDEX,
)
from social_api.services.repositories.videos_repo import VIDEO_ID_INDEX


def main():
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]

    print("Using DSN:", settings.mongo_dsn, "DB:", settings.mongo_db)
    users = db[settings.users_collection]
    videos = db[settings.videos_collection]

    # user: точечные выборки по id и по username (токену)
    users.create_index([("user_id", ASCENDING)],
                       unique=True, name=USER_ID_INDEX)
    users.create_index([("username", ASCENDING)],
                       unique=True, name=USERNAME_INDEX)

    # video
    videos.create_index([("video_id", ASCENDING)],
                        unique=True, name=VIDEO_ID_INDEX)

    print("Indexes ensured.")


if __name__ == "__main__":
    main()
