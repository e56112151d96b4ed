"""
Column names of the Spambase table, in file order.

48 word frequencies, 6 character frequencies, 3 capital-run statistics and
the binary label.
"""

WORD_FREQUENCY_FEATURES = [
    "word_freq_" + word for word in (
        "make", "address", "all", "3d", "our", "over", "remove", "internet",
        "order", "mail", "receive", "will", "people", "report", "addresses",
        "free", "business", "email", "you", "credit", "your", "font", "000",
        "money", "hp", "hpl", "george", "650", "lab", "labs", "telnet", "857",
        "data", "415", "85", "technology", "1999", "parts", "pm", "direct",
        "cs", "meeting", "original", "project", "re", "edu", "table",
        "conference",
    )
]

CHAR_FREQUENCY_FEATURES = [
    "char_freq_" + char for char in (";", "(", "[", "!", "$", "#")
]

CAPITAL_RUN_FEATURES = [
    "capital_run_length_average",
    "capital_run_length_longest",
    "capital_run_length_total",
]

SPAMBASE_FEATURES = WORD_FREQUENCY_FEATURES + CHAR_FREQUENCY_FEATURES + CAPITAL_RUN_FEATURES
SPAMBASE_LABEL = "spam"

N_FEATURES = len(SPAMBASE_FEATURES)
