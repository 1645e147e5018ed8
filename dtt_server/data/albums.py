# Studio albums. release_date keeps the YYYY-MM form so that string order is date order.
ALBUMS = [
    {
        "id": "album_1997",
        "name_cn": "陶喆",
        "name_en": "David Tao",
        "release_date": "1997-12",
        "cover_url": "/images/albums/album_1997.jpg",
        "album_detail": "首张个人专辑，词曲制作大多由本人完成。",
        "creation_background": "在洛杉矶的家庭录音室里完成大部分编曲与录音，把 R&B 带进华语流行乐。",
        "awards": ["第九届金曲奖 最佳新人", "第九届金曲奖 最佳制作人"],
        "language": "普通话",
        "record_label": "俏唱片",
    },
    {
        "id": "album_1999",
        "name_cn": "I'm OK",
        "name_en": "I'm OK",
        "release_date": "1999-11",
        "cover_url": "/images/albums/album_1999.jpg",
        "album_detail": "第二张个人专辑，延续首张专辑的 R&B 路线。",
        "creation_background": "以日常生活与成长感受为主题，编曲加入更多摇滚与放克元素。",
        "awards": [],
        "language": "普通话",
        "record_label": "俏唱片",
    },
    {
        "id": "album_2002",
        "name_cn": "黑色柳丁",
        "name_en": "Black Tangerine",
        "release_date": "2002-08",
        "cover_url": "/images/albums/album_2002.jpg",
        "album_detail": "第三张个人专辑，题材延伸到社会议题。",
        "creation_background": "在摇滚、R&B 与中国风之间做更多尝试，并重新演绎经典老歌。",
        "awards": [],
        "language": "普通话",
        "record_label": "俏唱片",
    },
]
