"""Exercise and song catalog loaded into every new store."""

from singsmart.models.catalog import SongCreate
from singsmart.models.exercise import ExerciseCreate

SEED_EXERCISES: list[dict] = [
    # Phase 1: Foundation
    {
        "name": "Lip Trill Warm-Up",
        "description": "Relax your lips and produce a 'brrr' sound while sliding up and down your range",
        "phase": 1,
        "category": "warmup",
        "difficulty": "easy",
        "duration_minutes": 3,
        "instructions": (
            "1. Take a deep breath\n2. Relax your lips completely\n"
            "3. Exhale while making a 'brrr' sound\n4. Slide from low to high and back down\n"
            "5. Repeat 5 times"
        ),
    },
    {
        "name": "Humming Scale",
        "description": "Gently hum through a major scale to warm up your voice",
        "phase": 1,
        "category": "warmup",
        "difficulty": "easy",
        "duration_minutes": 4,
        "instructions": (
            "1. Start on a comfortable low note\n"
            "2. Hum up the major scale (do-re-mi-fa-sol-la-ti-do)\n"
            "3. Come back down\n4. Move up a half step and repeat"
        ),
    },
    {
        "name": "Breath Support Exercise",
        "description": "Build diaphragmatic breathing strength for better vocal support",
        "phase": 1,
        "category": "technique",
        "difficulty": "medium",
        "duration_minutes": 5,
        "instructions": (
            "1. Lie flat on your back\n2. Place a book on your belly\n"
            "3. Breathe in deeply, raising the book\n4. Exhale slowly with a 'sss' sound\n"
            "5. Maintain even pressure for 10-15 seconds\n6. Repeat 8 times"
        ),
    },
    {
        "name": "Single Pitch Accuracy",
        "description": "Train your ear and voice to match single pitches accurately",
        "phase": 1,
        "category": "technique",
        "difficulty": "easy",
        "duration_minutes": 5,
        "instructions": (
            "1. Listen to the reference pitch\n2. Match it with your voice\n"
            "3. Hold for 3 seconds\n4. Check your accuracy\n5. Adjust if needed and try again"
        ),
    },
    {
        "name": "Vowel Clarity Exercise",
        "description": "Practice clear vowel formation for better tone quality",
        "phase": 1,
        "category": "technique",
        "difficulty": "medium",
        "duration_minutes": 4,
        "instructions": (
            "1. Sing 'Ah-Eh-Ee-Oh-Oo' on a single comfortable pitch\n"
            "2. Keep jaw relaxed and open\n3. Transition smoothly between vowels\n"
            "4. Repeat on different pitches"
        ),
    },
    # Phase 2: Technique & Expression
    {
        "name": "Dynamic Control",
        "description": "Practice crescendo and decrescendo for expressive singing",
        "phase": 2,
        "category": "technique",
        "difficulty": "medium",
        "duration_minutes": 5,
        "instructions": (
            "1. Start on a comfortable pitch very softly\n"
            "2. Gradually increase volume over 5 seconds\n3. Hold at full volume for 2 seconds\n"
            "4. Decrease volume back to soft over 5 seconds\n5. Repeat on different pitches"
        ),
    },
    {
        "name": "Phrase Shaping",
        "description": "Learn to shape musical phrases with emotion",
        "phase": 2,
        "category": "technique",
        "difficulty": "hard",
        "duration_minutes": 6,
        "instructions": (
            "1. Choose a simple melody\n2. Identify the emotional peak of the phrase\n"
            "3. Build intensity toward the peak\n4. Release tension after the peak\n"
            "5. Practice with different emotions"
        ),
    },
    {
        "name": "Style Exploration",
        "description": "Experiment with different vocal styles and genres",
        "phase": 2,
        "category": "technique",
        "difficulty": "medium",
        "duration_minutes": 7,
        "instructions": (
            "1. Choose a simple song\n2. Sing it in pop style\n"
            "3. Try it in jazz style with improvisation\n4. Attempt a classical approach\n"
            "5. Notice how each style changes your technique"
        ),
    },
    {
        "name": "Vibrato Development",
        "description": "Develop natural vibrato for richer vocal tone",
        "phase": 2,
        "category": "technique",
        "difficulty": "hard",
        "duration_minutes": 5,
        "instructions": (
            "1. Sing a sustained comfortable pitch\n2. Keep throat and jaw relaxed\n"
            "3. Allow natural oscillation to develop\n4. Don't force the vibrato\n"
            "5. Practice on different pitches"
        ),
    },
    # Phase 3: Performance & Confidence
    {
        "name": "Stage Presence",
        "description": "Build confidence with virtual audience practice",
        "phase": 3,
        "category": "performance",
        "difficulty": "medium",
        "duration_minutes": 8,
        "instructions": (
            "1. Stand in front of a mirror\n2. Imagine an audience before you\n"
            "3. Perform your song with eye contact\n4. Use natural gestures\n"
            "5. Practice entering and exiting the stage"
        ),
    },
    {
        "name": "Performance Run-Through",
        "description": "Complete performance simulation with feedback",
        "phase": 3,
        "category": "performance",
        "difficulty": "hard",
        "duration_minutes": 10,
        "instructions": (
            "1. Prepare your performance song\n2. Warm up with light exercises\n"
            "3. Perform the complete song\n4. Receive virtual audience feedback\n"
            "5. Review and improve"
        ),
    },
    {
        "name": "Microphone Technique",
        "description": "Learn proper microphone handling and positioning",
        "phase": 3,
        "category": "performance",
        "difficulty": "medium",
        "duration_minutes": 6,
        "instructions": (
            "1. Hold microphone at 45-degree angle\n2. Keep consistent distance (2-3 inches)\n"
            "3. Pull back on loud notes\n4. Move closer for soft passages\n"
            "5. Avoid covering the mic head"
        ),
    },
    {
        "name": "Recovery Techniques",
        "description": "Learn to recover gracefully from performance mistakes",
        "phase": 3,
        "category": "performance",
        "difficulty": "hard",
        "duration_minutes": 5,
        "instructions": (
            "1. Intentionally make a small mistake while singing\n"
            "2. Keep going without stopping\n3. Maintain your stage presence\n"
            "4. Refocus on the next phrase\n5. Practice until recovery feels natural"
        ),
    },
]

SEED_SONGS: list[dict] = [
    {"title": "Yesterday", "artist": "The Beatles", "genre": "Pop",
     "difficulty": "easy", "vocal_range": "tenor", "bpm": 76, "key": "F major"},
    {"title": "Someone Like You", "artist": "Adele", "genre": "Pop",
     "difficulty": "medium", "vocal_range": "alto", "bpm": 68, "key": "A major"},
    {"title": "Bohemian Rhapsody", "artist": "Queen", "genre": "Rock",
     "difficulty": "hard", "vocal_range": "tenor", "bpm": 72, "key": "Bb major"},
    {"title": "Hallelujah", "artist": "Leonard Cohen", "genre": "Folk",
     "difficulty": "medium", "vocal_range": "baritone", "bpm": 56, "key": "C major"},
    {"title": "Stay With Me", "artist": "Sam Smith", "genre": "Soul",
     "difficulty": "medium", "vocal_range": "tenor", "bpm": 84, "key": "Am"},
    {"title": "Shallow", "artist": "Lady Gaga", "genre": "Pop",
     "difficulty": "medium", "vocal_range": "alto", "bpm": 96, "key": "G major"},
    {"title": "Take Me Home", "artist": "John Denver", "genre": "Country",
     "difficulty": "easy", "vocal_range": "baritone", "bpm": 82, "key": "A major"},
    {"title": "Imagine", "artist": "John Lennon", "genre": "Pop",
     "difficulty": "easy", "vocal_range": "tenor", "bpm": 76, "key": "C major"},
    {"title": "Rolling in the Deep", "artist": "Adele", "genre": "Pop",
     "difficulty": "hard", "vocal_range": "alto", "bpm": 105, "key": "C minor"},
    {"title": "Bridge Over Troubled Water", "artist": "Simon & Garfunkel", "genre": "Folk",
     "difficulty": "hard", "vocal_range": "tenor", "bpm": 82, "key": "Eb major"},
    {"title": "Amazing Grace", "artist": "Traditional", "genre": "Gospel",
     "difficulty": "easy", "vocal_range": "soprano", "bpm": 60, "key": "G major"},
    {"title": "All of Me", "artist": "John Legend", "genre": "R&B",
     "difficulty": "medium", "vocal_range": "tenor", "bpm": 63, "key": "Ab major"},
]


def seed_exercises() -> list[ExerciseCreate]:
    return [ExerciseCreate(**data) for data in SEED_EXERCISES]


def seed_songs() -> list[SongCreate]:
    return [SongCreate(**data) for data in SEED_SONGS]
