from pymongo import MongoClient
from social_api.core.config import settings


def mismatches(col, count_field: str, list_field: str, key: str):
    """Документы, где счётчик разошёлся с длиной списка."""
    pipeline = [
        {"$project": {
            "_id": 0, key: 1, count_field: 1,
            "size": {"$size": {"$ifNull": [f"${list_field}", []]}},
        }},
        {"$match": {"$expr": {"$ne": [f"${count_field}", "$size"]}}},
    ]
    return list(col.aggregate(pipeline))


def main():
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]
    users = db[settings.users_collection]
    videos = db[settings.videos_collection]

    checks = [
        (users, "follow_count", "follows", "user_id"),
        (users, "follower_count", "followers", "user_id"),
        (videos, "favorite_count", "favorites", "video_id"),
    ]
    for col, count_field, list_field, key in checks:
        bad = mismatches(col, count_field, list_field, key)
        print(f"{col.name}.{count_field} vs {list_field}: {len(bad)}")
        for d in bad:
            print(f"  {key}={d[key]} count={d.get(count_field)} "
                  f"size={d['size']}")

    print("Check done.")


if __name__ == "__main__":
    main()
