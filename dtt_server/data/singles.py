# Singles released outside of studio albums
SINGLES = [
    {"id": "single_2001_08", "name_cn": "I Believe", "release_date": "2001年8月", "description": "迪士尼动画《亚特兰提斯：失落的帝国》主题曲"},
    {"id": "single_2006_07", "name_cn": "两个世界 (AKA: 活得更精彩)", "release_date": "2006年7月", "description": "动画片《帅狗黑皮》主题曲，录制于 2003 年"},
    {"id": "single_2008_05_25", "name_cn": "好好活下去", "release_date": "2008年5月25日", "description": "四川赈灾捐款活动主题曲"},
    {"id": "single_2014_09_15", "name_cn": "爱是凝望又离开", "release_date": "2014年9月15日", "description": "电影《寒蝉效应》主题曲"},
    {"id": "single_2014_09_22", "name_cn": "告别飞行", "release_date": "2014年9月22日", "description": "电影《寒蝉效应》插曲"},
    {"id": "single_2015_02_18", "name_cn": "万事如意", "release_date": "2015年2月18日", "description": "贺岁单曲"},
    {"id": "single_2017_08_21", "name_cn": "黑色星期二", "release_date": "2017年8月21日", "description": "数位单曲"},
    {"id": "single_2017_11_22", "name_cn": "爱，很简单 (20 周年初心版)", "release_date": "2017年11月22日", "description": "重新录制版本"},
    {"id": "single_2017_12_27", "name_cn": "Mars Baby", "release_date": "2017年12月27日", "description": "数位单曲"},
    {"id": "single_2020_12_24", "name_cn": "圣诞之吻", "release_date": "2020年12月24日", "description": "圣诞单曲"},
    {"id": "single_2023_07_03", "name_cn": "流沙 (Reimagined)", "release_date": "2023年7月3日", "description": "1997 年作品重制版"},
    {"id": "single_2023_07_11", "name_cn": "全世界会唱的歌", "release_date": "2023年7月11日", "description": "数位单曲"},
    {"id": "single_2023_08_16", "name_cn": "活该", "release_date": "2023年8月16日", "description": "数位单曲"},
    {"id": "single_2023_09_28", "name_cn": "I'm OK (Reimagined)", "release_date": "2023年9月28日", "description": "1999 年作品重制版"},
    {"id": "single_2024_01_22", "name_cn": "星心", "release_date": "2024年1月22日", "description": "数位单曲"},
    {"id": "single_2024_02_02", "name_cn": "小子", "release_date": "2024年2月2日", "description": "贺岁片《小子》电影主题曲"},
]
