import random

from locust import HttpUser, task, between

SONG_IDS = ["song_1997_01", "song_1997_03", "song_1999_02", "song_2002_03"]
SINGLE_IDS = ["single_2001_08", "single_2017_12_27", "single_2024_02_02"]


class CatalogReader(HttpUser):
    wait_time = between(1, 3)

    @task(3)  # browsing dominates
    def songs_by_rating(self):
        self.client.get("/api/songs/sort-by-rating?page=1&pageSize=10")

    @task(2)
    def all_resources_by_rating(self):
        self.client.get("/api/all-resources/sort-by-rating?pageSize=20")

    @task(2)
    def song_comments(self):
        song_id = random.choice(SONG_IDS)
        self.client.get(f"/api/songs/{song_id}/comments", name="/api/songs/[id]/comments")

    @task(1)
    def single_average(self):
        single_id = random.choice(SINGLE_IDS)
        self.client.get(f"/api/singles/{single_id}/rating/average", name="/api/singles/[id]/rating/average")
