theme_name = "nord"
# This is an example theme based on the nord color pallete.
# Copy it to ~/splitpad/config/themes/, tweak the colours, and set theme=nord
# in ~/splitpad/config/splitpad.conf.
# Values are xterm 256-colour indexes; roles left out fall back to the default theme.
theme_data = {
    # pane border of the focused pane
    "border": 60,
    # cursor line text and background
    "cursor_line_fg": 189,
    "cursor_line_bg": 67,
    # "Type something" in blurred and focused empty panes
    "placeholder": 59,
    "focused_placeholder": 110,
    # line-number gutter
    "line_number": 60,
    # help bar and status line
    "help": 103,
    # "Enter Filename?" title of the save prompt
    "prompt": 110,
}
