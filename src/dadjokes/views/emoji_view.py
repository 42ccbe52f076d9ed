RATING_EMOJIS = {
    'Sob': '😭',
    'Sigh': '😔',
    'Smirk': '😏',
}
DEFAULT_EMOJI = '😐'

def emoji_for(rating) -> str:
    return RATING_EMOJIS.get(rating, DEFAULT_EMOJI)
