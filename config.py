data_path = "~/.local/share/pinyin-flashcards"
log_file = data_path + "/flashcards.log"

# Remote example generator
api_key_env = "OPENAI_API_KEY"
api_url = "https://api.openai.com/v1/chat/completions"
model = "gpt-3.5-turbo"
request_timeout = 30  # seconds
prompt_template = "Give me an example phrase in Chinese, Pinyin, and English with the following word: {chinese}"

# Add card form
char_limit = 50
field_labels = [
    "Chinese Characters:",
    "Pinyin:",
    "Definition:",
    "Example (optional):",
]
field_placeholders = [
    "Chinese Characters (e.g. 你好)",
    "Pinyin (e.g. ni hao)",
    "Definition (e.g. Hello)",
    "Example Sentence (optional)",
]

card_width = 50

# 256 colour palette
colors = {
    "foreground": 15,       # White
    "primary": 32,          # Soft blue
    "secondary": 160,       # Warm red
    "accent": 28,           # Dark green
    "muted": 245,           # Gray
    "status_bar": 234,      # Darker gray
}

# Rich styles for UI elements
styles = {
    "title": f"bold color({colors['primary']})",
    "subtitle": f"italic color({colors['accent']})",
    "subtitle_red": f"italic color({colors['secondary']})",
    "subtitle_dark": f"italic color({colors['primary']})",
    "text": "",
    "card_border": f"color({colors['primary']})",
    "input_border": f"color({colors['primary']})",
    "focused_border": f"color({colors['secondary']})",
    "placeholder": f"color({colors['muted']})",
    "help": f"italic color({colors['muted']})",
}

# UI symbols
symbols = {
    "prompt": "» ",
    "cursor": "▏",
}
