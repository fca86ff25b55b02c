WELCOME = "Welcome to {skill_name}. Tell me the name of the song you want to hear."
HELP = (
    "Ask me to play a song by name, for example: play Bohemian Rhapsody. "
    "You can also say pause, resume or change song."
)
ASK_FOR_SONG = "Which song do you want to hear?"
PLAYING = "Playing: {query}"
NOT_FOUND = "I couldn't find a video for that search. Please try another term."
NO_AUDIO = "I couldn't extract the audio from that video. Please try another one."
SUPERSEDED = "A newer request already replaced that song."
CHANGE_SONG = "What song would you like to hear now?"
PAUSING = "Pausing playback."
RESUMING = "Resuming {query}"
NOTHING_TO_RESUME = "There's nothing to resume. Please search for a song."
FAREWELL = "Thanks for using {skill_name}. See you soon!"
NOT_UNDERSTOOD = "I didn't understand your request. Please try again."
SOMETHING_WENT_WRONG = "Sorry, something went wrong."
INTERNAL_ERROR = "There was an error processing your request."
