import logging
import os

from PySubRip.SettingsType import SettingsType
from PySubRip.SubRipData import SubRipData
from PySubRip.SubRipSubtitle import SubRipSubtitle

# legacy: write the tag only when the coordinates are all zero (compatible with existing output)
# present: write the tag only when coordinates were given
# never: do not write coordinate tags
coordinate_tag_modes = ['legacy', 'present', 'never']

def _coordinate_tags_from_environment(value : str) -> str:
    mode = value.strip().lower()
    if mode not in coordinate_tag_modes:
        logging.warning(f"Invalid SUBRIP_COORDINATE_TAGS value {repr(value)}, using 'legacy'")
        return 'legacy'
    return mode

# Defaults for composer settings, can be overridden from the environment
default_coordinate_tags = _coordinate_tags_from_environment(os.getenv('SUBRIP_COORDINATE_TAGS', 'legacy'))
default_line_ending = os.getenv('SUBRIP_LINE_ENDING', '\n')

class SubRipComposer:
    """
    Renders a SubRipData document as SRT text.

    Subtitles with empty text are skipped and the remainder are renumbered from 1.
    The document itself is not modified.
    """
    def __init__(self, settings : SettingsType|dict|None = None):
        settings = SettingsType(settings)
        self.coordinate_tags : str = settings.get_choice('coordinate_tags', coordinate_tag_modes, default_coordinate_tags)
        self.line_ending : str = settings.get_str('line_ending', default_line_ending) or '\n'

    def Compose(self, data : SubRipData) -> str:
        """
        Compose the subtitles into SRT format
        """
        output : list[str] = []
        number = 0
        count = len(data.subtitles)

        for index, subtitle in enumerate(data.subtitles, start=1):
            if subtitle.text == "":
                continue

            number += 1
            output.append(f"{number}\n")
            output.append(f"{subtitle.start_time} --> {subtitle.end_time}")
            if self._write_coordinates(subtitle):
                output.append(f" {subtitle.coordinates}")
            output.append(f"\n{subtitle.text}\n")

            if index != count:
                output.append("\n")

        if number < count:
            logging.debug(f"{count - number} empty subtitles were not written")

        result = "".join(output)
        if self.line_ending != "\n":
            result = result.replace("\n", self.line_ending)

        return result

    def _write_coordinates(self, subtitle : SubRipSubtitle) -> bool:
        if self.coordinate_tags == 'legacy':
            return subtitle.coordinates.is_zero
        if self.coordinate_tags == 'present':
            return not subtitle.coordinates.is_zero
        return False
