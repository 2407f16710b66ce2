"""
Prompt Templates - reply, follow-up and confirmation templates
"""

import re
from typing import Dict, Any, Optional


class PromptTemplates:
    """All reply templates for different languages"""

    def __init__(self):
        """Initialize templates"""
        # Required slots are asked in the user's language, the rest in English
        self.follow_up_questions = {
            "blood_request": {
                "bloodType": {
                    "en": "I understand you need blood. What blood type is required? (e.g., A+, B+, O+, AB+, A-, B-, O-, AB-)",
                    "hi": "मैं समझता हूं कि आपको खून चाहिए। किस ब्लड ग्रुप की जरूरत है? (जैसे A+, B+, O+, AB+, A-, B-, O-, AB-)",
                    "te": "మీకు రక్తం అవసరమని అర్థమైంది. ఏ బ్లడ్ గ్రూప్ కావాలి? (ఉదా: A+, B+, O+, AB+, A-, B-, O-, AB-)"
                },
                "unitsNeeded": {"en": "How many units of {bloodType} do you need?"},
                "hospitalName": {"en": "Which hospital or medical center is this for?"},
                "relationship": {"en": "Who needs the blood? (e.g., myself, mother, father, friend)"},
                "urgencyLevel": {"en": "When is the blood needed? (e.g., urgent/today, tomorrow, this week)"}
            },
            "elder_support": {
                "serviceType": {
                    "en": "What kind of support do you need?\n• Medicine Delivery\n• Medical Appointment\n• Grocery Shopping\n• Household Help\n• Companionship\n• Other",
                    "hi": "आपको किस तरह की सहायता चाहिए?\n• दवा पहुंचाना\n• डॉक्टर अपॉइंटमेंट\n• किराना खरीदारी\n• घरेलू मदद\n• साथ देना\n• अन्य",
                    "te": "మీకు ఏ రకమైన సహాయం కావాలి?\n• మందుల డెలివరీ\n• డాక్టర్ అపాయింట్‌మెంట్\n• కిరాణా షాపింగ్\n• ఇంటి పని సహాయం\n• తోడు\n• ఇతర"
                },
                "age": {"en": "What is the age of the person needing support?"},
                "frequency": {"en": "How often is support needed? (e.g., daily, weekly, one-time)"}
            },
            "complaint": {
                "complaintCategory": {
                    "en": "What type of issue are you reporting?\n• Road Maintenance\n• Water Supply\n• Waste Management\n• Electricity\n• Public Safety\n• Other",
                    "hi": "आप किस प्रकार की समस्या की शिकायत कर रहे हैं?\n• सड़क\n• पानी\n• कचरा\n• बिजली\n• सार्वजनिक सुरक्षा\n• अन्य",
                    "te": "మీరు ఏ రకమైన సమస్యను తెలియజేస్తున్నారు?\n• రోడ్డు\n• నీటి సరఫరా\n• చెత్త\n• విద్యుత్\n• ప్రజా భద్రత\n• ఇతర"
                },
                "complaintLocation": {"en": "Where is this issue located? (Please provide the address or area)"}
            }
        }

        self.default_follow_up = "Could you provide more details about your request?"

        self.knowledge = [
            (re.compile(r'mitochondria|mitchondria', re.IGNORECASE),
             "Mitochondria are often called the \"powerhouses\" of the cell! 🔋\n\n"
             "They're tiny structures inside cells that produce energy (ATP) for cellular processes. "
             "They have their own DNA and are essential for life.\n\nIs there anything else you'd like to know?"),
            (re.compile(r'\brbc\b|red blood cells?', re.IGNORECASE),
             "RBC stands for Red Blood Cells! 🩸\n\n"
             "They're the most common type of blood cell and carry oxygen from your lungs to the rest "
             "of your body using a protein called hemoglobin.\n\n**Key facts:**\n"
             "• They live about 120 days\n• They give blood its red color\n\n"
             "Speaking of blood - if you need blood donation help, I can assist with that too!"),
        ]

    def get_follow_up_question(self, category: str, slot: str, slots: Dict[str, Any], language: str) -> str:
        """Template question for one missing slot"""
        by_language = self.follow_up_questions.get(category, {}).get(slot)
        if not by_language:
            return self.default_follow_up

        question = by_language.get(language, by_language["en"])
        return question.replace("{bloodType}", str(slots.get("bloodType") or "blood"))

    def get_success_message(self, category: str, slots: Dict[str, Any], request_id: str) -> str:
        """Confirmation used when the AI collaborator cannot write one"""
        if category == "blood_request":
            return (
                "✅ **Blood Request Created Successfully!**\n\n"
                f"Your request for {slots.get('bloodType')} blood has been submitted.\n\n"
                "**Details:**\n"
                f"• Blood Type: {slots.get('bloodType')}\n"
                f"• Units: {slots.get('unitsNeeded') or 1}\n"
                f"• Hospital: {slots.get('hospitalName') or 'To be specified'}\n"
                f"• Request ID: {request_id}\n\n"
                "Volunteers and donors will be notified immediately. You should receive responses soon!"
            )
        if category == "elder_support":
            return (
                "✅ **Elder Support Request Created!**\n\n"
                "Your request for elder support has been submitted.\n\n"
                "**Details:**\n"
                f"• Service: {slots.get('serviceType') or 'Support needed'}\n"
                f"• Request ID: {request_id}\n\n"
                "Volunteers in your area will be notified and can accept your request."
            )
        if category == "complaint":
            return (
                "✅ **Complaint Registered Successfully!**\n\n"
                "Your complaint has been filed.\n\n"
                "**Details:**\n"
                f"• Category: {slots.get('complaintCategory') or 'General'}\n"
                f"• Request ID: {request_id}\n\n"
                "The appropriate department will review your complaint and take action."
            )
        return f"✅ Request created successfully! Request ID: {request_id}"

    def get_emergency_advice(self, language: str) -> str:
        """Advice for emergencies; no request is created for these"""
        if language == "hi":
            return ("🚨 यह आपातकाल लगता है। कृपया तुरंत 108 (एम्बुलेंस) या 112 पर कॉल करें।\n\n"
                    "अगर आपको खून, बुजुर्गों की मदद या शिकायत दर्ज करनी है, तो मुझे बताएं।")
        if language == "te":
            return ("🚨 ఇది అత్యవసర పరిస్థితిలా ఉంది. దయచేసి వెంటనే 108 (అంబులెన్స్) లేదా 112 కు కాల్ చేయండి.\n\n"
                    "రక్తం, వృద్ధుల సహాయం లేదా ఫిర్యాదు కోసం నాకు చెప్పండి.")
        return ("🚨 **This sounds like an emergency.**\n\n"
                "For life-threatening emergencies, please call 108 (ambulance) or 112 right away.\n\n"
                "If you need blood, elder support or want to report an issue, tell me and I will "
                "create a request for you.")

    def get_greeting(self) -> str:
        return ("Hello! 👋 I'm your SevaLink AI assistant. I'm here to help you with community services and support.\n\n"
                "**I can help you with:**\n• Blood donation requests\n• Elder care support\n"
                "• Filing complaints\n• General information\n\nHow can I assist you today?")

    def get_how_are_you(self) -> str:
        return ("I'm doing great, thank you for asking! 😊 I'm here and ready to help you with any "
                "community services you need.\n\nIs there anything specific I can assist you with today?")

    def get_thanks_reply(self) -> str:
        return ("You're very welcome! 😊 I'm glad I could help.\n\n"
                "If you need any other assistance with community services, feel free to ask anytime!")

    def get_capabilities(self) -> str:
        return ("I'm your SevaLink AI assistant! Here's what I can help you with:\n\n"
                "🩸 **Blood Requests** - Find blood donors quickly\n"
                "👴 **Elder Support** - Get help for elderly care\n"
                "📝 **Complaints** - Report community issues\n"
                "❓ **Information** - Answer questions about services\n\n"
                "**Just tell me what you need!** For example:\n"
                "• \"I need B+ blood urgently\"\n"
                "• \"My grandmother needs medicine delivery\"\n"
                "• \"Street lights not working in my area\"")

    def get_about(self) -> str:
        return ("SevaLink is a community service platform that connects people who need help with "
                "volunteers who can provide assistance.\n\n**Our Services:**\n"
                "• Blood donation coordination\n• Elder care support\n"
                "• Community complaint management\n• Emergency assistance\n\n"
                "We're here to make your community stronger and more connected! 🤝")

    def get_knowledge_answer(self, message: str) -> Optional[str]:
        for pattern, answer in self.knowledge:
            if pattern.search(message):
                return answer
        return None

    def get_out_of_scope(self) -> str:
        return ("That's an interesting question! While I'd love to help with general knowledge, "
                "I'm specifically designed to assist with community services.\n\n"
                "**I'm best at helping with:**\n• Blood donation requests\n• Elder care support\n"
                "• Community complaints\n• Service information\n\n"
                "Is there a community service I can help you with?")

    def get_default_reply(self) -> str:
        return ("I understand you're reaching out! 😊 While I'm here to chat, I'm specifically designed "
                "to help with community services.\n\n**I can assist you with:**\n"
                "• Blood donation requests\n• Elder care support\n• Filing complaints\n"
                "• Emergency assistance\n\nIs there a specific service you need help with today?")

    def get_validation_apology(self, field_label: str) -> str:
        return (f"I'm sorry, I couldn't complete your request because the {field_label} is missing or invalid. "
                f"Could you please tell me the {field_label}?")

    def get_persistence_failure(self) -> str:
        return "I understood your request, but encountered an error saving it. Please try again."
