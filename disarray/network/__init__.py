"""Non-blocking UDP sockets with client and server packet queues."""