"""
Reminiscence prompt phrasing.
Fixed question tables used by the prompt generator, keyed by topic, month and time of day.
All templates take a {name} placeholder.
"""

# Follow-up questions for a story's first topic tag
FOLLOW_UP_TEMPLATES = {
    "work": "You told me about your work before, {name}. What was the best part of your job?",
    "education": "I remember you mentioned school, {name}. Who was your favourite teacher?",
    "marriage": "You shared such lovely memories about your wedding, {name}. What was the music like?",
    "travel": "You mentioned travelling before, {name}. Where was the best place you ever visited?",
    "food": "You told me about cooking, {name}. What is your signature dish that everyone loved?",
    "military": "You mentioned your time in service, {name}. What is a moment you will never forget?",
    "music": "I know you love music, {name}. What song takes you right back to a special time?",
    "garden": "You mentioned your garden, {name}. What flowers did you love growing most?",
    "faith": "You shared your faith with me, {name}. What hymn or prayer means the most to you?",
    "sport": "I remember you talking about sports, {name}. What is the best match you ever saw?",
}

# Questionnaire-driven questions
BIRTHPLACE_TEMPLATE = "{name}, what was it like growing up in {birthplace}? I would love to hear about it."
OCCUPATION_TEMPLATE = "Tell me about your time working as a {job}, {name}. What was a typical day like?"
HOBBY_TEMPLATE = "I know you enjoy {hobby}, {name}. How did you first get into that?"

# Month index (0 = January) -> seasonal reminiscence topics
SEASONAL_TOPICS = {
    0: ["New Year memories", "winter weather when you were young", "Burns Night celebrations"],
    1: ["Valentine memories", "winter activities", "pancake day traditions"],
    2: ["spring flowers", "Mother Day memories", "spring cleaning traditions"],
    3: ["Easter memories", "spring outings", "gardening memories"],
    4: ["summer plans when young", "May Day celebrations", "end of school year"],
    5: ["Father Day", "summer holidays", "longest day of the year"],
    6: ["summer holidays", "childhood trips", "seaside memories", "picking berries"],
    7: ["summer memories", "harvest time", "back to school memories"],
    8: ["autumn colours", "harvest festival", "start of school memories"],
    9: ["Halloween memories", "autumn walks", "conker games"],
    10: ["Bonfire Night", "Remembrance Day", "early Christmas plans"],
    11: ["Christmas memories", "winter traditions", "Hogmanay"],
}

# (start hour inclusive, end hour exclusive) -> time-of-day topics
TIME_OF_DAY_TOPICS = [
    ((6, 10), ["What did breakfasts used to look like", "Morning routines when you were working"]),
    ((10, 12), ["What you used to do on mornings like this", "Morning walks or errands"]),
    ((12, 14), ["Favourite meals", "Sunday dinners", "Cooking memories"]),
    ((14, 17), ["Afternoon tea traditions", "Hobbies and pastimes"]),
    ((17, 20), ["Evening routines", "TV programmes from back in the day"]),
    ((20, 24), ["Bedtime stories from childhood", "Evening walks"]),
]

SEASONAL_TEMPLATE = "{name}, I was thinking about {topic}. Do you have any memories of that?"

GENERAL_PROMPTS = [
    "{name}, what is a memory that always makes you smile?",
    "Tell me about something you are proud of, {name}.",
    "{name}, what was the happiest time of your life?",
    "Is there a place you have lived that you think about often, {name}?",
]
