# apps/domains/submissions/serializers/answer.py
from rest_framework import serializers


class AnswerItemSerializer(serializers.Serializer):
    """
    {"question_id": 3, "value": "Paris" | ["A", "B"] | 7 | null}
    파일 응답은 value 대신 multipart answers[<i>][value] 파일로 온다.
    """
    question_id = serializers.IntegerField(min_value=1)
    value = serializers.JSONField(required=False, allow_null=True, default=None)

    def validate_value(self, value):
        if isinstance(value, dict):
            raise serializers.ValidationError("Answer value must be a string, a number, a list or null.")
        if isinstance(value, list) and any(isinstance(v, (list, dict)) for v in value):
            raise serializers.ValidationError("Nested answer values are not supported.")
        return value


class SubmitAnswersSerializer(serializers.Serializer):
    answers = AnswerItemSerializer(many=True)

    def validate_answers(self, value):
        seen = set()
        for item in value:
            qid = item["question_id"]
            if qid in seen:
                raise serializers.ValidationError(f"Question {qid} is answered more than once.")
            seen.add(qid)
        return value
