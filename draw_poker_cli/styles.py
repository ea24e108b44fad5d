from __future__ import annotations

# Textual stylesheet for the draw poker TUI.
APP_CSS = """
Screen {
    background: #0f1b2d;
    color: #f4f4f4;
}

Button {
    text-style: none;
}

Button:hover {
    text-style: none;
}

#welcome, #tutorial_text {
    border: round #405f84;
    padding: 1 2;
}

#layout {
    height: 1fr;
}

#left_col {
    width: 35%;
    border: solid #2b4667;
    padding: 1 1;
}

#center_col {
    width: 65%;
    border: solid #2b4667;
    padding: 1 1;
}

#status {
    height: 4;
    border: round #405f84;
    padding: 0 1;
    margin-bottom: 1;
}

#score {
    height: 5;
    border: round #405f84;
    padding: 0 1;
    margin-bottom: 1;
}

#log {
    height: 1fr;
    border: round #405f84;
}

#hand_title {
    height: 2;
}

#hand_row {
    height: 7;
}

#cursor_row {
    height: 2;
    margin-bottom: 1;
}

.card {
    width: 16;
    height: 5;
    margin-right: 1;
    border: tall #6389b7;
}

.selected {
    border: tall #f6b73c;
    color: #ffe1a7;
}

.cursor-slot {
    width: 16;
    margin-right: 1;
    content-align: center middle;
    color: #5b6b7d;
}

.cursor-on {
    color: #f6b73c;
}

#controls {
    height: 3;
}

.control {
    width: 16;
    margin-right: 1;
}
"""
