from pymongo import MongoClient
from social_api.core.config import settings


def main():
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]
    for name in (settings.users_collection, settings.videos_collection):
        print(f"== {name}")
        for idx in db[name].list_indexes():
            print("  ", idx["name"], dict(idx["key"]),
                  "unique" if idx.get("unique") else "")


if __name__ == "__main__":
    main()
