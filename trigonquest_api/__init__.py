"""TrigonQuest HTTP service"""
