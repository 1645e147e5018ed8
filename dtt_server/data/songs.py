SONGS = [
    # 陶喆 (1997)
    {"id": "song_1997_01", "album_id": "album_1997", "track_number": 1, "name_cn": "飞机场的10:30", "name_en": "Airport 10:30", "lyricist": "娃娃", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    {"id": "song_1997_02", "album_id": "album_1997", "track_number": 2, "name_cn": "爱很简单", "name_en": "Love Is Simple", "lyricist": "娃娃", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    {"id": "song_1997_03", "album_id": "album_1997", "track_number": 3, "name_cn": "流沙", "name_en": "Quicksand", "lyricist": "娃娃", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    {"id": "song_1997_04", "album_id": "album_1997", "track_number": 4, "name_cn": "望春风", "name_en": "Longing for the Spring Breeze", "lyricist": "李临秋", "composer": "邓雨贤", "arranger": "陶喆", "duration": None},
    {"id": "song_1997_05", "album_id": "album_1997", "track_number": 5, "name_cn": "小镇姑娘", "name_en": "Small Town Girl", "lyricist": "娃娃", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    # I'm OK (1999)
    {"id": "song_1999_01", "album_id": "album_1999", "track_number": 1, "name_cn": "找自己", "name_en": "Find Myself", "lyricist": "陶喆", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    {"id": "song_1999_02", "album_id": "album_1999", "track_number": 2, "name_cn": "I'm OK", "name_en": "I'm OK", "lyricist": "陶喆", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    {"id": "song_1999_03", "album_id": "album_1999", "track_number": 3, "name_cn": "普通朋友", "name_en": "Just Friends", "lyricist": "陶喆", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    {"id": "song_1999_04", "album_id": "album_1999", "track_number": 4, "name_cn": "二十二", "name_en": "Twenty-Two", "lyricist": "陶喆", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    # 黑色柳丁 (2002)
    {"id": "song_2002_01", "album_id": "album_2002", "track_number": 1, "name_cn": "黑色柳丁", "name_en": "Black Tangerine", "lyricist": "陶喆", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    {"id": "song_2002_02", "album_id": "album_2002", "track_number": 2, "name_cn": "蝴蝶", "name_en": "Butterfly", "lyricist": "陶喆", "composer": "陶喆", "arranger": "陶喆", "duration": None},
    {"id": "song_2002_03", "album_id": "album_2002", "track_number": 3, "name_cn": "月亮代表我的心", "name_en": "The Moon Represents My Heart", "lyricist": "孙仪", "composer": "汤尼", "arranger": "陶喆", "duration": None},
]
