"""Built-in YouTube demo catalogue and content-type keyword tables."""

from typing import Any


def _video(
    video_id: str,
    title: str,
    description: str,
    channel_title: str,
    channel_id: str,
    published_at: str,
) -> dict[str, Any]:
    return {
        "id": {"videoId": video_id},
        "snippet": {
            "title": title,
            "description": description,
            "thumbnails": {
                "medium": {
                    "url": f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg",
                    "width": 320,
                    "height": 180,
                },
            },
            "channelTitle": channel_title,
            "publishedAt": published_at,
            "channelId": channel_id,
        },
    }


DEMO_VIDEOS: tuple[dict[str, Any], ...] = (
    _video(
        "dQw4w9WgXcQ",
        "Never Gonna Give You Up",
        'The official video for "Never Gonna Give You Up" by Rick Astley',
        "Rick Astley",
        "UCuAXFkgsw1L7xaCfnd5JJOw",
        "2009-10-25T06:57:33Z",
    ),
    _video(
        "9bZkp7q19f0",
        "GANGNAM STYLE",
        "PSY - GANGNAM STYLE(강남스타일) M/V",
        "officialpsy",
        "UCrDkAvF9ZRMyvALrOFqOZ5A",
        "2012-07-15T08:34:21Z",
    ),
    _video(
        "kJQP7kiw5Fk",
        "Despacito",
        "Luis Fonsi - Despacito ft. Daddy Yankee",
        "LuisFonsiVEVO",
        "UCAxjGjCSj8wLGhcMQTKgxNw",
        "2017-01-12T19:06:32Z",
    ),
    _video(
        "fJ9rUzIMcZQ",
        "Bohemian Rhapsody",
        "Queen - Bohemian Rhapsody (Official Video Remastered)",
        "Queen Official",
        "UCwK2Grm574W1u-sBzLikldQ",
        "2008-08-01T14:54:09Z",
    ),
    _video(
        "OPf0YbXqDm0",
        "Uptown Funk",
        "Mark Ronson - Uptown Funk ft. Bruno Mars",
        "Mark Ronson",
        "UCqC9s1NAkvPidFpGBewPs5w",
        "2015-01-20T16:00:00Z",
    ),
    _video(
        "09R8_2nJtjg",
        "Happy",
        "Pharrell Williams - Happy",
        "Pharrell Williams",
        "UCoY1B2j6F5aO4gJX135kX5Q",
        "2014-06-08T16:00:00Z",
    ),
)

# Appended to live queries to steer results towards a content type.
QUERY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "music": ("music", "song", "audio", "MV", "cover", "live"),
    "movie": ("movie", "film", "trailer", "cinema", "full movie"),
    "educational": ("tutorial", "education", "learn", "how to", "guide", "course"),
    "gaming": ("gaming", "gameplay", "game", "walkthrough", "review"),
    "sports": ("sports", "football", "basketball", "soccer", "match", "game"),
    "news": ("news", "breaking", "report", "today", "latest"),
}

# Matched against demo titles, descriptions and channels.
FILTER_KEYWORDS: dict[str, tuple[str, ...]] = {
    "music": ("music", "song", "mv", "audio", "official"),
    "movie": ("movie", "film", "trailer", "cinema"),
    "educational": ("tutorial", "guide", "how", "learn", "education"),
    "gaming": ("game", "gaming", "playthrough", "review"),
    "sports": ("sports", "football", "basketball", "soccer", "match"),
    "news": ("news", "report", "breaking", "today", "latest"),
}
