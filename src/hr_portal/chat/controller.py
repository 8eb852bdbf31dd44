from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import admin_required, current_actor, json_body, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/chat/groups", methods=["GET"], endpoint="chat_groups")
    @login_required
    def chat_groups():
        return ok(groups=container.chat_service.groups_for(current_actor()))

    @app.route("/api/chat/groups", methods=["POST"], endpoint="create_chat_group")
    @admin_required
    def create_chat_group():
        body = json_body()
        group = container.chat_service.create_group(
            name=body.get("name", ""),
            topic=body.get("topic", ""),
            member_ids=body.get("members") or [],
        )
        return ok(201, group=group)

    @app.route("/api/chat/groups/<group_id>", methods=["PUT"], endpoint="update_chat_group")
    @admin_required
    def update_chat_group(group_id: str):
        body = json_body()
        group = container.chat_service.update_group(
            group_id,
            name=body.get("name", ""),
            topic=body.get("topic", ""),
            member_ids=body.get("members") or [],
        )
        return ok(group=group)

    @app.route("/api/chat/groups/<group_id>", methods=["DELETE"], endpoint="delete_chat_group")
    @admin_required
    def delete_chat_group(group_id: str):
        container.chat_service.delete_group(group_id)
        return jsonify({"success": True})

    @app.route("/api/chat/groups/<group_id>/messages", methods=["GET"], endpoint="chat_messages")
    @login_required
    def chat_messages(group_id: str):
        return ok(messages=container.chat_service.messages_for_group(current_actor(), group_id))

    @app.route("/api/chat/groups/<group_id>/messages", methods=["POST"], endpoint="send_chat_message")
    @login_required
    def send_chat_message(group_id: str):
        message = container.chat_service.send_message(current_actor(), group_id, json_body().get("text", ""))
        return ok(201, message=message)

    @app.route("/api/chat/groups/<group_id>/read", methods=["POST"], endpoint="mark_chat_read")
    @login_required
    def mark_chat_read(group_id: str):
        container.chat_read_state_service.mark_read(session["user_id"], group_id)
        return jsonify({"success": True})

    @app.route("/api/chat/unread", methods=["GET"], endpoint="chat_unread")
    @login_required
    def chat_unread():
        return ok(hasUnread=container.chat_read_state_service.has_unread(current_actor()))
