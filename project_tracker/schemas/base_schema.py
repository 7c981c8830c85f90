from marshmallow import EXCLUDE, pre_load

from .. import ma


class TrackerSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    # Incoming string fields trimmed before validation
    strip_fields = ()

    @pre_load
    def strip_text(self, data, **kwargs):
        if not isinstance(data, dict) or not self.strip_fields:
            return data
        data = dict(data)
        for key in self.strip_fields:
            if isinstance(data.get(key), str):
                data[key] = data[key].strip()
        return data
