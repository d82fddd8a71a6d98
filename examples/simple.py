import sys

from chord_shapes import ChordQuality, PitchClass, chord_voicings, fingering_score, to_tab

# Five best G major shapes in standard tuning
for fingering in chord_voicings(PitchClass.G, ChordQuality.Major)[:5]:
    sys.stdout.write(f"{to_tab(fingering)}  score={fingering_score(fingering)}\n")
